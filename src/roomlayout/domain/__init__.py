"""Domain layer - room entities and layout rules."""

from .entities import LayoutObject, ObjectGroup, Room, RoomFeature
from .exceptions import (
    DimensionOutOfRange,
    InsufficientMembers,
    LayoutError,
    OverlapRejected,
)
from .services import (
    CoordinateSpace,
    FeatureManager,
    GroupManager,
    ObjectManager,
    OverlapChecker,
    room_size_from_mats,
)
from .value_objects import (
    DEFAULT_OBJECT_COLOR,
    DimensionRange,
    FeatureType,
    Point2D,
    Rect,
    RoomShape,
    SizeConstraints,
    ViewType,
    Wall,
)

__all__ = [
    "CoordinateSpace",
    "DEFAULT_OBJECT_COLOR",
    "DimensionOutOfRange",
    "DimensionRange",
    "FeatureManager",
    "FeatureType",
    "GroupManager",
    "InsufficientMembers",
    "LayoutError",
    "LayoutObject",
    "ObjectGroup",
    "ObjectManager",
    "OverlapChecker",
    "OverlapRejected",
    "Point2D",
    "Rect",
    "Room",
    "RoomFeature",
    "RoomShape",
    "SizeConstraints",
    "ViewType",
    "Wall",
    "room_size_from_mats",
]
