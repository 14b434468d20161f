"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from roomlayout.domain import ViewType
from roomlayout.web.schemas.common import ObjectInputSchema, ObjectPatchSchema


class LayoutRequest(BaseModel):
    """Request carrying a layout document."""

    layout: dict[str, Any] = Field(..., description="Layout document JSON")


class RenderRequest(LayoutRequest):
    """Request for an ASCII rendering of a layout."""

    view: ViewType = Field(default=ViewType.TOP, description="View to draw")
    columns: int = Field(default=60, ge=10, le=400, description="Diagram width in characters")
    rows: int = Field(default=20, ge=5, le=200, description="Diagram height in characters")
    include_table: bool = Field(
        default=False, description="Also list objects, features and groups"
    )


class AddObjectRequest(LayoutRequest):
    """Request for adding an object to a layout."""

    object: ObjectInputSchema = Field(..., description="Object to add")


class UpdateObjectRequest(LayoutRequest):
    """Request for a partial object update."""

    object_id: str = Field(..., description="Id of the object to update")
    changes: ObjectPatchSchema = Field(..., description="Fields to change")


class RotateObjectRequest(LayoutRequest):
    """Request for rotating an object a quarter turn."""

    object_id: str = Field(..., description="Id of the object to rotate")


class CreateGroupRequest(LayoutRequest):
    """Request for grouping objects."""

    name: str = Field(default="", description="Group name")
    object_ids: list[str] = Field(..., description="Ids of the objects to group")


class MoveGroupRequest(LayoutRequest):
    """Request for moving a whole group."""

    group_id: str = Field(..., description="Id of the group to move")
    dx: float = Field(default=0, description="Offset along x in mm")
    dy: float = Field(default=0, description="Offset along y in mm")
    check_overlap: bool = Field(
        default=True, description="Reject the move if a member would overlap a non-member"
    )


class ResizeRoomRequest(LayoutRequest):
    """Request for resizing the room."""

    width: float = Field(..., gt=0, description="Room width in mm")
    depth: float = Field(..., gt=0, description="Room depth in mm")
    height: float = Field(..., gt=0, description="Room height in mm")
