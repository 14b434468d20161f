"""Layout engine - the facade every collaborator talks to.

The engine owns the room and the object, feature and group registries for
one editing session. Every public mutation validates all affected entities
before changing any of them, then notifies listeners (typically renderers
that redraw the views).
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from roomlayout.application.config import (
    LAYOUT_VERSION,
    LayoutParseError,
    parse_layout_document,
)
from roomlayout.application.settings import LayoutSettings
from roomlayout.domain import (
    CoordinateSpace,
    DimensionOutOfRange,
    FeatureManager,
    GroupManager,
    LayoutObject,
    ObjectGroup,
    ObjectManager,
    OverlapChecker,
    OverlapRejected,
    Room,
    RoomFeature,
)

logger = logging.getLogger(__name__)

__all__ = ["LayoutEngine", "LayoutListener"]

LayoutListener = Callable[["LayoutEngine"], None]


class LayoutEngine:
    """Session state for one room layout.

    Attributes:
        settings: Display and room-size settings.
        room: The shared room; other components hold references to it.
        overlap_checker: Collision policy for non-stackable objects.
        object_manager: Registry of layout objects.
        feature_manager: Registry of wall features.
        group_manager: Registry of object groups.
    """

    def __init__(
        self,
        room: Room | None = None,
        settings: LayoutSettings | None = None,
    ) -> None:
        self.settings = settings or LayoutSettings()
        self.room = room if room is not None else self.settings.create_room()
        self.overlap_checker = OverlapChecker()
        self.object_manager = ObjectManager(self.room, self.overlap_checker)
        self.feature_manager = FeatureManager(self.room)
        self.group_manager = GroupManager(self.object_manager)
        self._listeners: list[LayoutListener] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: LayoutListener) -> None:
        """Register a callback run after every committed mutation."""
        self._listeners.append(listener)

    def remove_listener(self, listener: LayoutListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def coordinate_space(self) -> CoordinateSpace:
        """Coordinate space for the top view with the session's settings."""
        return CoordinateSpace(
            self.room, self.settings.scale, self.settings.feature_offset
        )

    # ------------------------------------------------------------------
    # Room
    # ------------------------------------------------------------------

    def resize_room(self, width: float, depth: float, height: float) -> None:
        """Resize the room, keeping every object and feature valid.

        Objects are re-clamped into the new size and features re-fitted onto
        their walls; features left without width are dropped.

        Raises:
            ValueError: If a dimension is not positive.
            DimensionOutOfRange: If the size violates the room constraints
                or is smaller than a registered object.
            OverlapRejected: If re-clamping would push two non-stackable
                objects into each other. Pairs that already overlap, for
                example after a rotation, do not block the resize.
        """
        self.room.validate_size(width, depth, height)
        objects = self.object_manager.get_all()
        for name, attr, value in (
            ("width", "w", width),
            ("depth", "d", depth),
            ("height", "h", height),
        ):
            needed = max((getattr(obj, attr) for obj in objects), default=0)
            if value < needed:
                raise DimensionOutOfRange(name, value, needed)

        trial_room = Room(width=width, depth=depth, height=height)
        snapshots = []
        for obj in objects:
            snapshot = dataclasses.replace(obj)
            snapshot.constrain_to_room(trial_room)
            snapshots.append(snapshot)
        existing = set(self.overlapping_pairs())
        for first, second in self.overlap_checker.find_overlapping_pairs(snapshots):
            if (first.id, second.id) not in existing:
                raise OverlapRejected(first.id, second.id)

        self.room.update_size(width, depth, height)
        for obj, snapshot in zip(objects, snapshots):
            obj.x, obj.y, obj.z = snapshot.x, snapshot.y, snapshot.z
        dropped = self.feature_manager.revalidate()
        if dropped:
            logger.info(f"Resize dropped {len(dropped)} features with no width left")
        logger.debug(f"Resized room to {width}x{depth}x{height}")
        self._notify()

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    @property
    def objects(self) -> list[LayoutObject]:
        return self.object_manager.get_all()

    def get_object(self, obj_id: str) -> LayoutObject:
        """Look up a registered object.

        Raises:
            KeyError: If no object has this id.
        """
        obj = self.object_manager.get(obj_id)
        if obj is None:
            raise KeyError(f"Unknown object: {obj_id}")
        return obj

    def add_object(self, obj: LayoutObject) -> LayoutObject:
        """Fit an object into the room and register it."""
        self.object_manager.add(obj)
        self._notify()
        return obj

    def update_object(self, obj_id: str, patch: dict[str, Any]) -> LayoutObject:
        """Apply a partial update; see ObjectManager.update()."""
        obj = self.object_manager.update(obj_id, patch)
        self._notify()
        return obj

    def move_object(self, obj_id: str, x: float, y: float) -> LayoutObject:
        """Move an object; raises OverlapRejected on collision."""
        obj = self.object_manager.move(obj_id, x, y)
        self._notify()
        return obj

    def can_place(self, obj: LayoutObject, x: float, y: float) -> bool:
        """Whether obj could sit at the (already clamped) position."""
        return self.object_manager.can_place(obj, x, y)

    def rotate_object(self, obj_id: str) -> LayoutObject:
        """Rotate an object a quarter turn about its centre.

        Rotation does not check overlap, so a non-stackable object may end
        up intersecting another one.
        """
        obj = self.object_manager.rotate(obj_id)
        self._notify()
        return obj

    def remove_object(self, obj_id: str) -> LayoutObject | None:
        """Unregister an object and drop it from its group."""
        obj = self.object_manager.remove(obj_id)
        if obj is None:
            return None
        self.group_manager.remove_from_group(obj_id)
        self._notify()
        return obj

    def object_at(self, x: float, y: float) -> LayoutObject | None:
        """Topmost object under a room-space point."""
        return self.object_manager.get_object_at(x, y)

    def overlapping_pairs(self) -> list[tuple[str, str]]:
        """Ids of non-stackable objects that currently intersect.

        Placement never creates such a pair, but a rotation or a group move
        without overlap checks can.
        """
        pairs = self.overlap_checker.find_overlapping_pairs(self.objects)
        return [(first.id, second.id) for first, second in pairs]

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------

    @property
    def features(self) -> list[RoomFeature]:
        return self.feature_manager.get_all()

    def add_feature(self, feature: RoomFeature) -> bool:
        """Fit a feature onto its wall; False if nothing was left to add."""
        added = self.feature_manager.add(feature)
        if added:
            self._notify()
        return added

    def remove_feature(self, feature: RoomFeature) -> bool:
        removed = self.feature_manager.remove(feature)
        if removed:
            self._notify()
        return removed

    def move_feature(self, feature: RoomFeature, center: float) -> RoomFeature:
        """Slide a feature along its wall so its centre sits at ``center``."""
        self.feature_manager.move(feature, center)
        self._notify()
        return feature

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    @property
    def groups(self) -> list[ObjectGroup]:
        return self.group_manager.get_all()

    def get_group(self, group_id: str) -> ObjectGroup:
        group = self.group_manager.get_group(group_id)
        if group is None:
            raise KeyError(f"Unknown group: {group_id}")
        return group

    def group_for_object(self, obj_id: str) -> ObjectGroup | None:
        return self.group_manager.get_group_by_object_id(obj_id)

    def objects_in_group(self, group_id: str) -> list[LayoutObject]:
        return self.group_manager.get_objects_in_group(group_id)

    def create_group(self, name: str, object_ids: list[str]) -> ObjectGroup:
        """Group ungrouped objects; raises InsufficientMembers below two."""
        group = self.group_manager.create_group(name, object_ids)
        self._notify()
        return group

    def ungroup(self, group_id: str) -> bool:
        removed = self.group_manager.ungroup(group_id)
        if removed:
            self._notify()
        return removed

    def move_group(
        self, group_id: str, dx: float, dy: float, check_overlap: bool = False
    ) -> bool:
        """Translate a whole group or nothing; returns whether it moved."""
        moved = self.group_manager.move_group(
            group_id, dx, dy, self.room, check_overlap=check_overlap
        )
        if moved:
            self._notify()
        return moved

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_document(self, saved_at: datetime | None = None) -> dict[str, Any]:
        """Serialize the session to the persisted layout document shape."""
        saved_at = saved_at or datetime.now(timezone.utc)
        return {
            "room": self.room.to_dict(),
            "objects": [obj.to_dict() for obj in self.objects],
            "roomFeatures": [feature.to_dict() for feature in self.features],
            "groups": [group.to_dict() for group in self.groups],
            "version": LAYOUT_VERSION,
            "savedAt": saved_at.isoformat(),
        }

    def load_document(self, data: dict[str, Any]) -> None:
        """Replace the whole session from a layout document.

        Everything is validated before anything is replaced, so a failed
        load leaves the current session untouched. Overlapping non-stackable
        objects are loaded as saved and logged; rotation can produce them.

        Raises:
            LayoutParseError: If the document is malformed, holds duplicate
                object ids or objects that do not fit the room.
            DimensionOutOfRange: If the room size violates the constraints.
        """
        document = parse_layout_document(data)
        room_data = document.room
        self.room.validate_size(room_data.width, room_data.depth, room_data.height)
        trial_room = Room(
            width=room_data.width, depth=room_data.depth, height=room_data.height
        )

        objects: list[LayoutObject] = []
        seen: set[str] = set()
        for index, item in enumerate(document.objects):
            try:
                obj = LayoutObject.from_dict(item.model_dump(exclude_none=True))
            except ValueError as e:
                raise LayoutParseError(
                    f"objects[{index}]: {e}", error_type="validation"
                ) from e
            if obj.id in seen:
                raise LayoutParseError(
                    f"objects[{index}]: duplicate object id {obj.id}",
                    error_type="validation",
                )
            seen.add(obj.id)
            obj.constrain_to_room(trial_room)
            if not obj.fits_in(trial_room):
                raise LayoutParseError(
                    f"objects[{index}]: object {obj.id} does not fit in the room",
                    error_type="validation",
                )
            objects.append(obj)

        for first, second in self.overlap_checker.find_overlapping_pairs(objects):
            logger.warning(f"Loaded overlapping objects {first.id} and {second.id}")

        features: list[RoomFeature] = []
        for item in document.room_features:
            feature = RoomFeature.from_dict(item.model_dump())
            feature.validate_bounds(trial_room)
            if feature.width > 0:
                features.append(feature)
            else:
                logger.warning(
                    f"Skipped {feature.type.value} on {feature.wall.value} wall: no width left"
                )

        groups = [
            ObjectGroup.from_dict(item.model_dump(by_alias=True, exclude_none=True))
            for item in document.groups or []
        ]

        self.room.update_size(room_data.width, room_data.depth, room_data.height)
        self.object_manager.replace_all(objects)
        self.feature_manager.replace_all(features)
        self.group_manager.replace_all(groups)
        logger.debug(
            f"Loaded layout with {len(objects)} objects, {len(features)} features "
            f"and {len(self.groups)} groups"
        )
        self._notify()
