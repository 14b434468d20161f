"""Object groups and the all-or-nothing group move."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..entities import LayoutObject, ObjectGroup, Room
from ..exceptions import InsufficientMembers
from .object_manager import ObjectManager

logger = logging.getLogger(__name__)

__all__ = ["GroupManager", "MIN_GROUP_SIZE"]

MIN_GROUP_SIZE = 2


class GroupManager:
    """Tracks which objects move together.

    Groups reference objects by id only. A lookup table from object id to
    owning group id enforces that an object belongs to at most one group.

    Attributes:
        object_manager: Registry the member ids resolve against.
    """

    def __init__(self, object_manager: ObjectManager) -> None:
        self.object_manager = object_manager
        self._groups: dict[str, ObjectGroup] = {}
        self._owner: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def get_all(self) -> list[ObjectGroup]:
        return list(self._groups.values())

    def get_group(self, group_id: str) -> ObjectGroup | None:
        return self._groups.get(group_id)

    def get_group_by_object_id(self, object_id: str) -> ObjectGroup | None:
        group_id = self._owner.get(object_id)
        return self._groups[group_id] if group_id is not None else None

    def create_group(self, name: str, object_ids: Iterable[str]) -> ObjectGroup:
        """Group the given objects.

        Ids that are unknown or already grouped are skipped.

        Raises:
            InsufficientMembers: If fewer than two ids remain.
        """
        available = [
            obj_id
            for obj_id in dict.fromkeys(object_ids)
            if obj_id in self.object_manager and obj_id not in self._owner
        ]
        if len(available) < MIN_GROUP_SIZE:
            raise InsufficientMembers(available)

        group = ObjectGroup(
            name=name or f"Group {len(self._groups) + 1}",
            object_ids=available,
        )
        self._register(group)
        logger.debug(f"Created group {group.id} with {len(group)} objects")
        return group

    def ungroup(self, group_id: str) -> bool:
        """Dissolve a group; its objects stay registered."""
        group = self._groups.pop(group_id, None)
        if group is None:
            return False
        for obj_id in group.object_ids:
            self._owner.pop(obj_id, None)
        logger.debug(f"Dissolved group {group_id}")
        return True

    def add_to_group(self, group_id: str, object_id: str) -> bool:
        """Add an ungrouped, registered object to a group.

        Returns:
            False if the object already belongs to a group.
        """
        group = self._require(group_id)
        if object_id not in self.object_manager:
            raise KeyError(f"Unknown object: {object_id}")
        if object_id in self._owner:
            return self._owner[object_id] == group_id
        group.add_object_id(object_id)
        self._owner[object_id] = group_id
        return True

    def remove_from_group(self, object_id: str) -> None:
        """Drop an object from its group, pruning the group if it empties."""
        group_id = self._owner.pop(object_id, None)
        if group_id is None:
            return
        group = self._groups[group_id]
        group.remove_object_id(object_id)
        if len(group) < 1:
            del self._groups[group_id]
            logger.debug(f"Pruned empty group {group_id}")

    def get_objects_in_group(self, group_id: str) -> list[LayoutObject]:
        group = self._groups.get(group_id)
        if group is None:
            return []
        members = (self.object_manager.get(obj_id) for obj_id in group.object_ids)
        return [obj for obj in members if obj is not None]

    def move_group(
        self,
        group_id: str,
        dx: float,
        dy: float,
        room: Room,
        check_overlap: bool = False,
    ) -> bool:
        """Translate every member by (dx, dy), or none of them.

        Every member's prospective footprint must stay inside the room.
        With ``check_overlap`` each non-stackable member is also checked
        against the non-members; members are not checked against each
        other.

        Returns:
            True if the move was committed.

        Raises:
            KeyError: If the group does not exist.
        """
        self._require(group_id)
        members = self.get_objects_in_group(group_id)
        if not members:
            return False

        for obj in members:
            new_x = obj.x + dx
            new_y = obj.y + dy
            if new_x < 0 or new_x + obj.w > room.width:
                return False
            if new_y < 0 or new_y + obj.d > room.depth:
                return False

        if check_overlap:
            member_ids = {obj.id for obj in members}
            population = self.object_manager.get_all()
            checker = self.object_manager.overlap_checker
            for obj in members:
                blocker = checker.find_overlap(
                    obj, obj.x + dx, obj.y + dy, population, ignore_ids=member_ids
                )
                if blocker is not None:
                    logger.info(f"Group {group_id} move blocked by {blocker.id}")
                    return False

        for obj in members:
            obj.x += dx
            obj.y += dy
            obj.constrain_to_room(room)
        logger.debug(f"Moved group {group_id} by ({dx}, {dy})")
        return True

    def clear(self) -> None:
        self._groups = {}
        self._owner = {}

    def replace_all(self, groups: Iterable[ObjectGroup]) -> None:
        """Swap in restored groups.

        Ids of unregistered objects are dropped, an object claimed by an
        earlier group is dropped from later ones and empty groups are
        pruned.
        """
        self.clear()
        for group in groups:
            claimed = [
                obj_id
                for obj_id in group.object_ids
                if obj_id in self.object_manager and obj_id not in self._owner
            ]
            if len(claimed) != len(group.object_ids):
                logger.warning(
                    f"Group {group.id}: dropped {len(group.object_ids) - len(claimed)} "
                    "unknown or already grouped object ids"
                )
            group.object_ids = claimed
            if not claimed:
                logger.warning(f"Pruned empty group {group.id}")
                continue
            self._register(group)

    def _register(self, group: ObjectGroup) -> None:
        self._groups[group.id] = group
        for obj_id in group.object_ids:
            self._owner[obj_id] = group.id

    def _require(self, group_id: str) -> ObjectGroup:
        try:
            return self._groups[group_id]
        except KeyError:
            raise KeyError(f"Unknown group: {group_id}") from None
