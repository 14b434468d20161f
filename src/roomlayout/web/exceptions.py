"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from roomlayout.application.config import LayoutParseError
from roomlayout.domain import DimensionOutOfRange, InsufficientMembers, OverlapRejected


class MoveRejectedError(Exception):
    """Raised when a group move would take a member out of bounds or into another object."""

    def __init__(self, group_id: str, dx: float, dy: float) -> None:
        self.group_id = group_id
        self.dx = dx
        self.dy = dy
        super().__init__(f"Group {group_id} cannot move by ({dx:g}, {dy:g})")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(LayoutParseError)
    async def layout_parse_error_handler(
        request: Request, exc: LayoutParseError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(DimensionOutOfRange)
    async def dimension_error_handler(
        request: Request, exc: DimensionOutOfRange
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "dimension_out_of_range",
                "details": {
                    "dimension": exc.dimension,
                    "value": exc.value,
                    "minimum": exc.minimum,
                    "maximum": exc.maximum,
                },
            },
        )

    @app.exception_handler(InsufficientMembers)
    async def insufficient_members_handler(
        request: Request, exc: InsufficientMembers
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "insufficient_members",
                "details": {"available_ids": exc.available_ids},
            },
        )

    @app.exception_handler(OverlapRejected)
    async def overlap_handler(request: Request, exc: OverlapRejected) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": str(exc),
                "error_type": "overlap",
                "details": {"object_id": exc.object_id, "other_id": exc.other_id},
            },
        )

    @app.exception_handler(MoveRejectedError)
    async def move_rejected_handler(
        request: Request, exc: MoveRejectedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": str(exc),
                "error_type": "move_rejected",
                "details": {"group_id": exc.group_id, "dx": exc.dx, "dy": exc.dy},
            },
        )

    @app.exception_handler(KeyError)
    async def not_found_handler(request: Request, exc: KeyError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": exc.args[0] if exc.args else "Not found",
                "error_type": "not_found",
                "details": None,
            },
        )
