"""Room endpoints."""

from fastapi import APIRouter

from roomlayout.web.dependencies import SettingsDep, engine_from_layout
from roomlayout.web.schemas.requests import ResizeRoomRequest
from roomlayout.web.schemas.responses import ERROR_RESPONSES, LayoutResponseSchema

router = APIRouter(prefix="/room", tags=["room"], responses=ERROR_RESPONSES)


@router.post("/resize", response_model=LayoutResponseSchema)
async def resize_room(
    request: ResizeRoomRequest,
    settings: SettingsDep,
) -> LayoutResponseSchema:
    """Resize the room, re-fitting every object and feature."""
    engine = engine_from_layout(request.layout, settings)
    engine.resize_room(request.width, request.depth, request.height)
    return LayoutResponseSchema(layout=engine.to_document())
