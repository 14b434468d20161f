"""Layout object endpoints."""

from fastapi import APIRouter

from roomlayout.domain import LayoutObject
from roomlayout.web.dependencies import SettingsDep, engine_from_layout
from roomlayout.web.schemas.requests import (
    AddObjectRequest,
    RotateObjectRequest,
    UpdateObjectRequest,
)
from roomlayout.web.schemas.responses import ERROR_RESPONSES, LayoutResponseSchema

router = APIRouter(prefix="/objects", tags=["objects"], responses=ERROR_RESPONSES)


@router.post("", response_model=LayoutResponseSchema)
async def add_object(
    request: AddObjectRequest,
    settings: SettingsDep,
) -> LayoutResponseSchema:
    """Add an object to a layout.

    Returns:
        The updated layout and the id of the new object.
    """
    engine = engine_from_layout(request.layout, settings)
    obj = engine.add_object(LayoutObject(**request.object.model_dump()))
    return LayoutResponseSchema(layout=engine.to_document(), object_id=obj.id)


@router.post("/update", response_model=LayoutResponseSchema)
async def update_object(
    request: UpdateObjectRequest,
    settings: SettingsDep,
) -> LayoutResponseSchema:
    """Apply a partial update to an object, all or nothing."""
    engine = engine_from_layout(request.layout, settings)
    obj = engine.update_object(request.object_id, request.changes.changes())
    return LayoutResponseSchema(layout=engine.to_document(), object_id=obj.id)


@router.post("/rotate", response_model=LayoutResponseSchema)
async def rotate_object(
    request: RotateObjectRequest,
    settings: SettingsDep,
) -> LayoutResponseSchema:
    """Rotate an object a quarter turn about its centre."""
    engine = engine_from_layout(request.layout, settings)
    obj = engine.rotate_object(request.object_id)
    return LayoutResponseSchema(layout=engine.to_document(), object_id=obj.id)
