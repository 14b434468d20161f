"""Footprint collision checks between layout objects.

Only pairs in which both objects are non-stackable are compared. A
stackable object never blocks and is never blocked, even by a
non-stackable one.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable

from ..entities import LayoutObject
from ..value_objects import Rect

__all__ = ["OverlapChecker"]


class OverlapChecker:
    """Decides whether a candidate footprint collides with placed objects."""

    @staticmethod
    def is_overlapping(rect_a: Rect, rect_b: Rect) -> bool:
        """Strict rectangle intersection; touching edges do not overlap."""
        return rect_a.intersects(rect_b)

    def find_overlap(
        self,
        candidate: LayoutObject,
        new_x: float,
        new_y: float,
        objects: Iterable[LayoutObject],
        exclude_self: bool = True,
        ignore_ids: Collection[str] = (),
    ) -> LayoutObject | None:
        """Return the first placed object the candidate would overlap.

        Args:
            candidate: Object being placed; its size and stackable flag are used.
            new_x: Prospective x of the candidate.
            new_y: Prospective y of the candidate.
            objects: Population of placed objects.
            exclude_self: Skip the placed object sharing the candidate's id.
            ignore_ids: Further ids to skip, e.g. fellow group members that
                move in the same step.

        Returns:
            The blocking object, or None if the placement is clear.
        """
        if candidate.stackable:
            return None
        new_rect = Rect(new_x, new_y, candidate.w, candidate.d)
        for other in objects:
            if exclude_self and other.id == candidate.id:
                continue
            if other.id in ignore_ids or other.stackable:
                continue
            if self.is_overlapping(new_rect, other.rect):
                return other
        return None

    def check_overlap(
        self,
        candidate: LayoutObject,
        new_x: float,
        new_y: float,
        objects: Iterable[LayoutObject],
        exclude_self: bool = True,
    ) -> bool:
        """True if placing the candidate at (new_x, new_y) would collide."""
        return (
            self.find_overlap(candidate, new_x, new_y, objects, exclude_self)
            is not None
        )

    def find_overlapping_pairs(
        self, objects: Iterable[LayoutObject]
    ) -> list[tuple[LayoutObject, LayoutObject]]:
        """All colliding pairs among non-stackable objects, in input order."""
        blocking = [obj for obj in objects if not obj.stackable]
        pairs = []
        for i, first in enumerate(blocking):
            for second in blocking[i + 1 :]:
                if self.is_overlapping(first.rect, second.rect):
                    pairs.append((first, second))
        return pairs
