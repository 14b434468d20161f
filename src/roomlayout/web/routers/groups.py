"""Object group endpoints."""

from fastapi import APIRouter

from roomlayout.web.dependencies import SettingsDep, engine_from_layout
from roomlayout.web.exceptions import MoveRejectedError
from roomlayout.web.schemas.requests import CreateGroupRequest, MoveGroupRequest
from roomlayout.web.schemas.responses import ERROR_RESPONSES, LayoutResponseSchema

router = APIRouter(prefix="/groups", tags=["groups"], responses=ERROR_RESPONSES)


@router.post("", response_model=LayoutResponseSchema)
async def create_group(
    request: CreateGroupRequest,
    settings: SettingsDep,
) -> LayoutResponseSchema:
    """Group two or more ungrouped objects."""
    engine = engine_from_layout(request.layout, settings)
    group = engine.create_group(request.name, request.object_ids)
    return LayoutResponseSchema(layout=engine.to_document(), group_id=group.id)


@router.post("/move", response_model=LayoutResponseSchema)
async def move_group(
    request: MoveGroupRequest,
    settings: SettingsDep,
) -> LayoutResponseSchema:
    """Move every member of a group by the same offset, or none of them."""
    engine = engine_from_layout(request.layout, settings)
    moved = engine.move_group(
        request.group_id, request.dx, request.dy, check_overlap=request.check_overlap
    )
    if not moved:
        raise MoveRejectedError(request.group_id, request.dx, request.dy)
    return LayoutResponseSchema(layout=engine.to_document(), group_id=request.group_id)
