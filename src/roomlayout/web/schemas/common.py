"""Common Pydantic schemas shared across requests and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from roomlayout.domain import DEFAULT_OBJECT_COLOR


class ObjectInputSchema(BaseModel):
    """A new layout object; the id is generated by the server."""

    name: str = Field(default="", description="Display name")
    w: float = Field(default=1000, gt=0, description="Width (x) in mm")
    d: float = Field(default=1000, gt=0, description="Depth (y) in mm")
    h: float = Field(default=1000, gt=0, description="Height (z) in mm")
    x: float = Field(default=0, description="Left edge in mm")
    y: float = Field(default=0, description="Top edge in mm")
    z: float = Field(default=0, description="Elevation in mm")
    color: str = Field(default=DEFAULT_OBJECT_COLOR, description="Display color token")
    stackable: bool = Field(default=True, description="Allow overlapping other objects")


class ObjectPatchSchema(BaseModel):
    """Fields to change on an existing object; omitted fields keep their value."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, description="Display name")
    w: float | None = Field(default=None, gt=0, description="Width (x) in mm")
    d: float | None = Field(default=None, gt=0, description="Depth (y) in mm")
    h: float | None = Field(default=None, gt=0, description="Height (z) in mm")
    x: float | None = Field(default=None, description="Left edge in mm")
    y: float | None = Field(default=None, description="Top edge in mm")
    z: float | None = Field(default=None, description="Elevation in mm")
    color: str | None = Field(default=None, description="Display color token")
    stackable: bool | None = Field(
        default=None, description="Allow overlapping other objects"
    )

    def changes(self) -> dict[str, Any]:
        """The fields the client actually sent."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
