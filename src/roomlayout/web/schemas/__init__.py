"""Pydantic schemas for the REST API."""

from roomlayout.web.schemas.common import ObjectInputSchema, ObjectPatchSchema
from roomlayout.web.schemas.requests import (
    AddObjectRequest,
    CreateGroupRequest,
    LayoutRequest,
    MoveGroupRequest,
    RenderRequest,
    ResizeRoomRequest,
    RotateObjectRequest,
    UpdateObjectRequest,
)
from roomlayout.web.schemas.responses import (
    ERROR_RESPONSES,
    ErrorResponseSchema,
    LayoutResponseSchema,
    RenderResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "ObjectInputSchema",
    "ObjectPatchSchema",
    # Requests
    "AddObjectRequest",
    "CreateGroupRequest",
    "LayoutRequest",
    "MoveGroupRequest",
    "RenderRequest",
    "ResizeRoomRequest",
    "RotateObjectRequest",
    "UpdateObjectRequest",
    # Responses
    "ERROR_RESPONSES",
    "ErrorResponseSchema",
    "LayoutResponseSchema",
    "RenderResponseSchema",
    "ValidationResultSchema",
]
