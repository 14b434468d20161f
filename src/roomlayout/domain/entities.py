"""Domain entities for room layouts."""

from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .exceptions import DimensionOutOfRange
from .value_objects import (
    DEFAULT_OBJECT_COLOR,
    FeatureType,
    Point2D,
    Rect,
    SizeConstraints,
    Wall,
)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str) -> str:
    """Generate a unique id such as ``obj_1718000000000_k3j9x0a1b``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


@dataclass
class Room:
    """The rectangular room every other entity is placed in.

    The room origin is its top-left corner seen from above; x grows along
    the width, y along the depth and z along the height.

    Attributes:
        width: Room width in millimetres.
        depth: Room depth in millimetres.
        height: Room height in millimetres.
        size_constraints: Optional permitted ranges enforced by update_size().
    """

    width: float = 5900
    depth: float = 2200
    height: float = 2500
    size_constraints: SizeConstraints | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0 or self.height <= 0:
            raise ValueError("Room dimensions must be positive")

    def set_size_constraints(self, constraints: SizeConstraints | None) -> None:
        """Replace the size constraints.

        The current size is not re-validated against the new constraints.
        """
        self.size_constraints = constraints

    def validate_size(self, width: float, depth: float, height: float) -> None:
        """Check a prospective size without applying it.

        Raises:
            ValueError: If any dimension is not positive.
            DimensionOutOfRange: If a dimension violates the size constraints.
        """
        if width <= 0 or depth <= 0 or height <= 0:
            raise ValueError("Room dimensions must be positive")
        if self.size_constraints is None:
            return
        checks = (
            ("width", width, self.size_constraints.width),
            ("depth", depth, self.size_constraints.depth),
            ("height", height, self.size_constraints.height),
        )
        for name, value, allowed in checks:
            if allowed is not None and not allowed.contains(value):
                raise DimensionOutOfRange(name, value, allowed.min, allowed.max)

    def update_size(self, width: float, depth: float, height: float) -> None:
        """Replace all three dimensions, or none of them."""
        self.validate_size(width, depth, height)
        self.width = width
        self.depth = depth
        self.height = height

    def wall_length(self, wall: Wall) -> float:
        """Length of a wall: room width for top/bottom, depth for left/right."""
        match wall:
            case Wall.TOP | Wall.BOTTOM:
                return self.width
            case Wall.LEFT | Wall.RIGHT:
                return self.depth

    def to_dict(self) -> dict[str, float]:
        return {"width": self.width, "depth": self.depth, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Room:
        return cls(width=data["width"], depth=data["depth"], height=data["height"])


@dataclass(eq=False)
class LayoutObject:
    """A free-standing box of furniture placed in the room.

    Attributes:
        name: Display name.
        w: Size along x (width) in millimetres.
        d: Size along y (depth) in millimetres.
        h: Size along z (height) in millimetres.
        x: Left edge position.
        y: Top edge position (seen from above).
        z: Elevation of the bottom face.
        color: Opaque display token passed through to renderers.
        stackable: When False, the object may not overlap other
            non-stackable objects.
        id: Unique identifier, generated once and never changed.
    """

    name: str = ""
    w: float = 1000
    d: float = 1000
    h: float = 1000
    x: float = 0
    y: float = 0
    z: float = 0
    color: str = DEFAULT_OBJECT_COLOR
    stackable: bool = True
    id: str = field(default_factory=lambda: generate_id("obj"))

    def __post_init__(self) -> None:
        if self.w <= 0 or self.d <= 0 or self.h <= 0:
            raise ValueError("Object dimensions must be positive")

    @property
    def rect(self) -> Rect:
        """Footprint rectangle seen from above."""
        return Rect(self.x, self.y, self.w, self.d)

    def get_center(self) -> Point2D:
        """Centre of the footprint."""
        return Point2D(self.x + self.w / 2, self.y + self.d / 2)

    def contains_point(self, x: float, y: float) -> bool:
        """Check whether a room-space point falls on the footprint."""
        return self.rect.contains(x, y)

    def rotate_90(self, room: Room) -> None:
        """Rotate a quarter turn about the footprint centre.

        Width and depth swap; the result is clamped back into the room.
        No overlap check is made here.
        """
        center = self.get_center()
        self.w, self.d = self.d, self.w
        self.x = center.x - self.w / 2
        self.y = center.y - self.d / 2
        self.constrain_to_room(room)

    def constrain_to_room(self, room: Room) -> None:
        """Clamp x, y and z into the room without changing the size.

        If the object is larger than the room along an axis, that
        coordinate floors to 0.
        """
        self.x = max(0, min(room.width - self.w, self.x))
        self.y = max(0, min(room.depth - self.d, self.y))
        self.z = max(0, min(room.height - self.h, self.z))

    def fits_in(self, room: Room) -> bool:
        """Check that the whole box lies inside the room."""
        return (
            0 <= self.x
            and self.x + self.w <= room.width
            and 0 <= self.y
            and self.y + self.d <= room.depth
            and 0 <= self.z
            and self.z + self.h <= room.height
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "w": self.w,
            "d": self.d,
            "h": self.h,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "color": self.color,
            "stackable": self.stackable,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutObject:
        """Restore an object, applying defaults for optional fields."""
        kwargs: dict[str, Any] = {
            "name": data.get("name") or "",
            "w": data["w"],
            "d": data["d"],
            "h": data["h"],
            "x": data["x"],
            "y": data["y"],
            "z": data.get("z") or 0,
            "color": data.get("color") or DEFAULT_OBJECT_COLOR,
            "stackable": data.get("stackable", True),
        }
        if data.get("id"):
            kwargs["id"] = data["id"]
        return cls(**kwargs)


@dataclass(eq=False)
class RoomFeature:
    """A window, door or closet anchored to a wall.

    Attributes:
        type: Kind of feature.
        wall: Wall the feature sits on.
        position: Offset of the leading edge from the wall's origin corner.
        width: Extent along the wall.
    """

    type: FeatureType = FeatureType.WINDOW
    wall: Wall = Wall.TOP
    position: float = 0
    width: float = 1000

    def __post_init__(self) -> None:
        self.type = FeatureType(self.type)
        self.wall = Wall(self.wall)

    @property
    def is_horizontal(self) -> bool:
        return self.wall.is_horizontal

    def get_wall_length(self, room: Room) -> float:
        return room.wall_length(self.wall)

    def validate_bounds(self, room: Room) -> None:
        """Clamp the feature onto its wall.

        Position is clamped first and the width trimmed afterwards, so an
        oversized feature loses its trailing edge rather than moving.
        """
        wall_length = self.get_wall_length(room)
        self.position = max(0, min(wall_length - self.width, self.position))
        self.width = min(self.width, wall_length - self.position)

    def move_center_to(self, center: float, room: Room) -> None:
        """Slide along the wall so the feature centre sits at ``center``."""
        wall_length = self.get_wall_length(room)
        self.position = max(0, min(wall_length - self.width, center - self.width / 2))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "wall": self.wall.value,
            "position": self.position,
            "width": self.width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RoomFeature:
        return cls(
            type=FeatureType(data["type"]),
            wall=Wall(data["wall"]),
            position=data["position"],
            width=data["width"],
        )


@dataclass(eq=False)
class ObjectGroup:
    """A named set of layout object ids that move together.

    Members are referenced by id only; the group never owns the objects.

    Attributes:
        name: Display name.
        object_ids: Member ids without duplicates, in insertion order.
        id: Unique identifier.
        created_at: Creation timestamp (UTC).
    """

    name: str = ""
    object_ids: list[str] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("group"))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.object_ids = list(dict.fromkeys(self.object_ids))

    def __len__(self) -> int:
        return len(self.object_ids)

    def add_object_id(self, object_id: str) -> None:
        if object_id not in self.object_ids:
            self.object_ids.append(object_id)

    def remove_object_id(self, object_id: str) -> None:
        if object_id in self.object_ids:
            self.object_ids.remove(object_id)

    def contains_object_id(self, object_id: str) -> bool:
        return object_id in self.object_ids

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "objectIds": list(self.object_ids),
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ObjectGroup:
        kwargs: dict[str, Any] = {
            "name": data.get("name") or "",
            "object_ids": list(data.get("objectIds") or []),
        }
        if data.get("id"):
            kwargs["id"] = data["id"]
        created_at = data.get("createdAt")
        if isinstance(created_at, datetime):
            kwargs["created_at"] = created_at
        elif created_at:
            kwargs["created_at"] = datetime.fromisoformat(created_at)
        return cls(**kwargs)
