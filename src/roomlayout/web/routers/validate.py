"""Layout validation endpoints."""

from fastapi import APIRouter

from roomlayout.application.config import LayoutParseError
from roomlayout.domain import LayoutError
from roomlayout.web.dependencies import SettingsDep, engine_from_layout
from roomlayout.web.schemas.requests import LayoutRequest
from roomlayout.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_layout(
    request: LayoutRequest,
    settings: SettingsDep,
) -> ValidationResultSchema:
    """Check whether a layout document can be loaded.

    Args:
        request: Request containing the layout to validate.
        settings: Injected layout settings.

    Returns:
        Validation result with errors, warnings and entity counts.
    """
    try:
        engine = engine_from_layout(request.layout, settings)
    except LayoutParseError as e:
        errors = e.details or [{"message": e.message}]
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"path": d.get("path"), "message": d.get("message", e.message)}
                for d in errors
            ],
        )
    except LayoutError as e:
        return ValidationResultSchema(
            is_valid=False, errors=[{"path": "room", "message": str(e)}]
        )

    return ValidationResultSchema(
        is_valid=True,
        warnings=[
            {"path": "objects", "message": f"Objects {first} and {second} overlap"}
            for first, second in engine.overlapping_pairs()
        ],
        object_count=len(engine.objects),
        feature_count=len(engine.features),
        group_count=len(engine.groups),
    )
