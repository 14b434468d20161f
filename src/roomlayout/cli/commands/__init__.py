"""CLI command implementations for the roomlayout application.

This package contains the commands of the roomlayout CLI, including:
- validate: Validate a layout file
- new, resize, room-size: Create and size rooms
- add-object, update-object, move-object, rotate-object, remove-object
- add-feature, remove-feature
- group, ungroup, move-group
"""

from roomlayout.cli.commands.features import add_feature, remove_feature
from roomlayout.cli.commands.groups import group_objects, move_group, ungroup
from roomlayout.cli.commands.objects import (
    add_object,
    move_object,
    remove_object,
    rotate_object,
    update_object,
)
from roomlayout.cli.commands.room import new_layout, resize_room, room_size
from roomlayout.cli.commands.validate import validate_command

__all__ = [
    "add_feature",
    "add_object",
    "group_objects",
    "move_group",
    "move_object",
    "new_layout",
    "remove_feature",
    "remove_object",
    "resize_room",
    "room_size",
    "rotate_object",
    "ungroup",
    "update_object",
    "validate_command",
]
