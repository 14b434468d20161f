"""Pydantic models for persisted layout documents.

Field names (and aliases) match the JSON written by every client of the
layout format, so ``w``/``d``/``h`` and camelCase keys are kept as-is.
Unknown keys are ignored to stay compatible with documents written by
newer clients.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roomlayout.domain.value_objects import FeatureType, Wall

LAYOUT_VERSION = "1.0"

# Versions this loader can read.
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class RoomSchema(BaseModel):
    """Room dimensions in millimetres."""

    model_config = ConfigDict(extra="ignore")

    width: float = Field(gt=0, description="Room width in mm")
    depth: float = Field(gt=0, description="Room depth in mm")
    height: float = Field(gt=0, description="Room height in mm")


class LayoutObjectSchema(BaseModel):
    """A persisted layout object.

    Optional fields left out of a document fall back to the object
    defaults when restored: ``z`` 0, ``stackable`` true and the default
    color token.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    w: float = Field(gt=0, description="Width in mm")
    d: float = Field(gt=0, description="Depth in mm")
    h: float = Field(gt=0, description="Height in mm")
    x: float
    y: float
    z: float | None = None
    color: str | None = None
    stackable: bool | None = None


class RoomFeatureSchema(BaseModel):
    """A persisted wall feature."""

    model_config = ConfigDict(extra="ignore")

    type: FeatureType
    wall: Wall
    position: float
    width: float


class ObjectGroupSchema(BaseModel):
    """A persisted object group."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = None
    name: str | None = None
    object_ids: list[str] = Field(default_factory=list, alias="objectIds")
    created_at: datetime | None = Field(default=None, alias="createdAt")


class LayoutDocument(BaseModel):
    """Root model of a saved layout.

    Attributes:
        room: Room dimensions.
        objects: Layout objects in drawing order.
        room_features: Wall features (``roomFeatures`` in JSON).
        groups: Optional object groups; omitted means no groups.
        version: Document format version.
        saved_at: Save timestamp (``savedAt`` in JSON).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    room: RoomSchema
    objects: list[LayoutObjectSchema] = Field(default_factory=list)
    room_features: list[RoomFeatureSchema] = Field(
        default_factory=list, alias="roomFeatures"
    )
    groups: list[ObjectGroupSchema] | None = None
    version: str = LAYOUT_VERSION
    saved_at: datetime | None = Field(default=None, alias="savedAt")

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Reject document versions this loader cannot read."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported layout version {v!r} (supported: {supported})")
        return v
