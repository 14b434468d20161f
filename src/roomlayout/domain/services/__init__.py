"""Domain services for room layouts.

This package provides:
- Coordinate conversion between display pixels and room millimetres
- The non-stackable overlap policy
- Object, feature and group registries with validated mutations
- Room sizing from a floor-mat count
"""

from .coordinates import CoordinateSpace
from .feature_manager import FeatureManager
from .group_manager import MIN_GROUP_SIZE, GroupManager
from .object_manager import UPDATABLE_FIELDS, ObjectManager
from .overlap import OverlapChecker
from .room_sizing import MAT_AREA_MM2, MAT_COUNT_RANGE, room_size_from_mats

__all__ = [
    "CoordinateSpace",
    "FeatureManager",
    "GroupManager",
    "MAT_AREA_MM2",
    "MAT_COUNT_RANGE",
    "MIN_GROUP_SIZE",
    "ObjectManager",
    "OverlapChecker",
    "UPDATABLE_FIELDS",
    "room_size_from_mats",
]
