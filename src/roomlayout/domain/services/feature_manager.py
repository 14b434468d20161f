"""Registry of wall features (windows, doors, closets)."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..entities import Room, RoomFeature
from ..value_objects import Rect

logger = logging.getLogger(__name__)

__all__ = ["FeatureManager"]


class FeatureManager:
    """Owns the features attached to the room's walls.

    Features have no id; they are tracked by object identity so removal
    is safe while iterating a snapshot of the list.
    """

    def __init__(self, room: Room) -> None:
        self.room = room
        self._features: list[RoomFeature] = []

    def __len__(self) -> int:
        return len(self._features)

    def __contains__(self, feature: object) -> bool:
        return any(f is feature for f in self._features)

    def get_all(self) -> list[RoomFeature]:
        return list(self._features)

    def add(self, feature: RoomFeature) -> bool:
        """Clamp the feature onto its wall and register it.

        Returns:
            True if registered, False if nothing of the feature was left
            on the wall after clamping.
        """
        feature.validate_bounds(self.room)
        if feature.width <= 0:
            logger.info(f"Dropped {feature.type.value} on {feature.wall.value} wall: no width left")
            return False
        self._features.append(feature)
        logger.debug(
            f"Added {feature.type.value} on {feature.wall.value} wall at {feature.position}"
        )
        return True

    def remove(self, feature: RoomFeature) -> bool:
        """Unregister a feature; returns False if it was not registered."""
        for index, existing in enumerate(self._features):
            if existing is feature:
                del self._features[index]
                logger.debug(f"Removed {feature.type.value} on {feature.wall.value} wall")
                return True
        return False

    def move(self, feature: RoomFeature, center: float) -> RoomFeature:
        """Slide a registered feature along its wall to a new centre."""
        if feature not in self:
            raise KeyError("Feature is not registered")
        feature.move_center_to(center, self.room)
        return feature

    def find_at(
        self,
        x: float,
        y: float,
        rect_of: Callable[[RoomFeature], Rect | None],
    ) -> RoomFeature | None:
        """Topmost feature whose hit rectangle contains the point.

        Args:
            x: Point x in the same space ``rect_of`` returns.
            y: Point y in the same space ``rect_of`` returns.
            rect_of: Maps a feature to its hit rectangle (or None).
        """
        for feature in reversed(self._features):
            rect = rect_of(feature)
            if rect is not None and rect.contains(x, y):
                return feature
        return None

    def revalidate(self) -> list[RoomFeature]:
        """Re-clamp every feature after a room resize.

        Returns:
            The features dropped because no width was left.
        """
        kept: list[RoomFeature] = []
        dropped: list[RoomFeature] = []
        for feature in self._features:
            feature.validate_bounds(self.room)
            (kept if feature.width > 0 else dropped).append(feature)
        self._features = kept
        return dropped

    def clear(self) -> None:
        self._features = []

    def replace_all(self, features: Iterable[RoomFeature]) -> None:
        self._features = list(features)
