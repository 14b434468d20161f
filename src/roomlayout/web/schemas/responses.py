"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutResponseSchema(BaseModel):
    """Response carrying the layout document after a committed mutation."""

    layout: dict[str, Any] = Field(..., description="Updated layout document")
    object_id: str | None = Field(
        default=None, description="Id of the object created or changed"
    )
    group_id: str | None = Field(default=None, description="Id of the group created or moved")


class ValidationResultSchema(BaseModel):
    """Response for layout validation."""

    is_valid: bool = Field(..., description="Whether the layout can be loaded")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )
    object_count: int = Field(default=0, description="Number of objects")
    feature_count: int = Field(default=0, description="Number of wall features")
    group_count: int = Field(default=0, description="Number of groups")


class RenderResponseSchema(BaseModel):
    """Response for an ASCII rendering."""

    view: str = Field(..., description="View that was drawn")
    diagram: str = Field(..., description="ASCII diagram")
    table: str | None = Field(default=None, description="Object, feature and group listing")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )


# Error bodies produced by the registered exception handlers.
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponseSchema, "description": "Unknown object or group"},
    409: {"model": ErrorResponseSchema, "description": "Move or placement rejected"},
    422: {"model": ErrorResponseSchema, "description": "Invalid layout or request"},
}
