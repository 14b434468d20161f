"""Registry of layout objects and the validate-then-commit mutation path."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from typing import Any

from ..entities import LayoutObject, Room
from ..exceptions import OverlapRejected
from .overlap import OverlapChecker

logger = logging.getLogger(__name__)

__all__ = ["ObjectManager", "UPDATABLE_FIELDS"]

UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {"name", "w", "d", "h", "x", "y", "z", "color", "stackable"}
)


class ObjectManager:
    """Owns the layout objects registered in a room.

    Objects are keyed by id in insertion order; later objects are drawn on
    top and win hit tests. Mutations are computed on a snapshot copy and
    copied onto the live object only once every check has passed.

    Attributes:
        room: Shared room the objects must stay inside.
        overlap_checker: Collision policy for non-stackable objects.
    """

    def __init__(self, room: Room, overlap_checker: OverlapChecker | None = None) -> None:
        self.room = room
        self.overlap_checker = overlap_checker or OverlapChecker()
        self._objects: dict[str, LayoutObject] = {}

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj_id: object) -> bool:
        return obj_id in self._objects

    def get(self, obj_id: str) -> LayoutObject | None:
        return self._objects.get(obj_id)

    def get_all(self) -> list[LayoutObject]:
        """Registered objects in insertion order."""
        return list(self._objects.values())

    def prepare(self, candidate: LayoutObject) -> LayoutObject:
        """Return a validated copy of ``candidate`` fitted into the room.

        The position is clamped first, then any size that would still stick
        out of the room is trimmed. For a non-stackable candidate the
        fitted footprint is checked against every other registered object.

        Raises:
            OverlapRejected: If the fitted footprint would collide.
        """
        new_x = max(0, min(self.room.width - candidate.w, candidate.x))
        new_y = max(0, min(self.room.depth - candidate.d, candidate.y))
        new_z = max(0, min(self.room.height - candidate.h, candidate.z))
        fitted = dataclasses.replace(
            candidate,
            w=min(candidate.w, self.room.width - new_x),
            d=min(candidate.d, self.room.depth - new_y),
            h=min(candidate.h, self.room.height - new_z),
            x=new_x,
            y=new_y,
            z=new_z,
        )
        blocker = self.overlap_checker.find_overlap(
            fitted, fitted.x, fitted.y, self._objects.values()
        )
        if blocker is not None:
            logger.info(f"Rejected placement of {candidate.id}: overlaps {blocker.id}")
            raise OverlapRejected(candidate.id, blocker.id)
        return fitted

    def add(self, obj: LayoutObject) -> LayoutObject:
        """Fit ``obj`` into the room and register it.

        Raises:
            ValueError: If an object with the same id is already registered.
            OverlapRejected: If the object would collide.
        """
        if obj.id in self._objects:
            raise ValueError(f"Object {obj.id} is already registered")
        fitted = self.prepare(obj)
        self._commit(obj, fitted)
        self._objects[obj.id] = obj
        logger.debug(f"Added object {obj.id} at ({obj.x}, {obj.y})")
        return obj

    def update(self, obj_id: str, patch: dict[str, Any]) -> LayoutObject:
        """Apply a partial update atomically.

        Raises:
            KeyError: If the object is not registered.
            ValueError: If the patch names unknown fields or gives a
                non-positive size.
            OverlapRejected: If the result would collide; the object is
                left untouched.
        """
        obj = self._require(obj_id)
        unknown = set(patch) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        fitted = self.prepare(dataclasses.replace(obj, **patch))
        self._commit(obj, fitted)
        logger.debug(f"Updated object {obj_id} with {sorted(patch)}")
        return obj

    def move(self, obj_id: str, x: float, y: float) -> LayoutObject:
        """Move an object, clamping into the room and checking overlap."""
        return self.update(obj_id, {"x": x, "y": y})

    def can_place(self, obj: LayoutObject, x: float, y: float) -> bool:
        """Non-raising overlap predicate for an already-clamped position."""
        return not self.overlap_checker.check_overlap(obj, x, y, self._objects.values())

    def rotate(self, obj_id: str) -> LayoutObject:
        """Rotate an object a quarter turn in place (no overlap check)."""
        obj = self._require(obj_id)
        obj.rotate_90(self.room)
        logger.debug(f"Rotated object {obj_id} to {obj.w}x{obj.d}")
        return obj

    def remove(self, obj_id: str) -> LayoutObject | None:
        """Unregister an object; unknown ids are ignored."""
        obj = self._objects.pop(obj_id, None)
        if obj is not None:
            logger.debug(f"Removed object {obj_id}")
        return obj

    def get_object_at(self, x: float, y: float) -> LayoutObject | None:
        """Topmost object whose footprint contains the room-space point."""
        for obj in reversed(list(self._objects.values())):
            if obj.contains_point(x, y):
                return obj
        return None

    def clear(self) -> None:
        self._objects = {}

    def replace_all(self, objects: Iterable[LayoutObject]) -> None:
        """Swap in a fully validated collection."""
        self._objects = {obj.id: obj for obj in objects}

    def _require(self, obj_id: str) -> LayoutObject:
        try:
            return self._objects[obj_id]
        except KeyError:
            raise KeyError(f"Unknown object: {obj_id}") from None

    @staticmethod
    def _commit(target: LayoutObject, source: LayoutObject) -> None:
        for name in UPDATABLE_FIELDS:
            setattr(target, name, getattr(source, name))
