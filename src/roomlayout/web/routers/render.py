"""ASCII rendering endpoints."""

from fastapi import APIRouter

from roomlayout.infrastructure import LayoutDiagramFormatter, LayoutTableFormatter
from roomlayout.web.dependencies import SettingsDep, engine_from_layout
from roomlayout.web.schemas.requests import RenderRequest
from roomlayout.web.schemas.responses import RenderResponseSchema

router = APIRouter(prefix="/render", tags=["render"])


@router.post("", response_model=RenderResponseSchema)
async def render_layout(
    request: RenderRequest,
    settings: SettingsDep,
) -> RenderResponseSchema:
    """Draw one view of a layout as ASCII art."""
    engine = engine_from_layout(request.layout, settings)
    diagram = LayoutDiagramFormatter().format(
        engine.room,
        engine.objects,
        engine.features,
        view=request.view,
        width=request.columns,
        height=request.rows,
    )
    table = None
    if request.include_table:
        table = LayoutTableFormatter().format(
            engine.room, engine.objects, engine.features, engine.groups
        )
    return RenderResponseSchema(view=request.view.value, diagram=diagram, table=table)
