"""Value objects for the room layout domain.

All measurements are millimetres in room space unless a name says
otherwise (``*_px`` values are display pixels).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_OBJECT_COLOR = "rgba(0,150,255,0.5)"


class Wall(str, Enum):
    """The four room walls that features are anchored to.

    Positions along ``TOP`` and ``BOTTOM`` run left to right (room x axis);
    positions along ``LEFT`` and ``RIGHT`` run top to bottom (room y axis).
    """

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def is_horizontal(self) -> bool:
        """True for walls that run along the room width."""
        match self:
            case Wall.TOP | Wall.BOTTOM:
                return True
            case Wall.LEFT | Wall.RIGHT:
                return False


class FeatureType(str, Enum):
    """Kinds of wall-mounted room features."""

    WINDOW = "window"
    DOOR = "door"
    CLOSET = "closet"


class ViewType(str, Enum):
    """Orthographic views of the room.

    Attributes:
        TOP: Plan view, room width by room depth.
        FRONT: Elevation looking along y, room width by room height.
        SIDE: Elevation looking along x, room depth by room height.
    """

    TOP = "top"
    FRONT = "front"
    SIDE = "side"


class RoomShape(str, Enum):
    """Aspect presets used when sizing a room from a floor-mat count."""

    SQUARE = "square"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Point2D:
    """A point in a 2D plane."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and extent.

    ``w`` runs along x and ``d`` along y, matching the footprint of a
    layout object seen from above.
    """

    x: float
    y: float
    w: float
    d: float

    @property
    def right(self) -> float:
        """x coordinate of the right edge."""
        return self.x + self.w

    @property
    def bottom(self) -> float:
        """y coordinate of the bottom edge."""
        return self.y + self.d

    def intersects(self, other: Rect) -> bool:
        """Strict intersection test; rectangles sharing an edge do not intersect."""
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.d
            and self.y + self.d > other.y
        )

    def contains(self, x: float, y: float) -> bool:
        """Closed containment test (edges count as inside)."""
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.d


@dataclass(frozen=True)
class DimensionRange:
    """Inclusive min/max range for one room dimension."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError("Range minimum cannot exceed maximum")

    def contains(self, value: float) -> bool:
        """Check whether value lies within the range."""
        return self.min <= value <= self.max

    def clamp(self, value: float) -> float:
        """Clamp value into the range."""
        return max(self.min, min(self.max, value))

    def to_dict(self) -> dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class SizeConstraints:
    """Permitted room size ranges.

    Attributes:
        width: Range for the room width.
        depth: Range for the room depth.
        height: Optional range for the room height; unconstrained if None.
    """

    width: DimensionRange
    depth: DimensionRange
    height: DimensionRange | None = None

    @classmethod
    def from_dict(cls, data: dict) -> SizeConstraints:
        """Build constraints from ``{"width": {"min", "max"}, ...}``."""
        height = data.get("height")
        return cls(
            width=DimensionRange(**data["width"]),
            depth=DimensionRange(**data["depth"]),
            height=DimensionRange(**height) if height else None,
        )

    def to_dict(self) -> dict[str, dict[str, float]]:
        data = {"width": self.width.to_dict(), "depth": self.depth.to_dict()}
        if self.height is not None:
            data["height"] = self.height.to_dict()
        return data
