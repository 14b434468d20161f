"""Layout settings dataclass.

This module provides the LayoutSettings dataclass holding the display and
room-size parameters shared by the engine, the CLI and the web API.
"""

from __future__ import annotations

from dataclasses import dataclass

from roomlayout.domain import Room, RoomShape, room_size_from_mats
from roomlayout.domain.value_objects import DimensionRange, SizeConstraints


@dataclass(frozen=True)
class LayoutSettings:
    """Configuration for a layout session.

    Attributes:
        scale: Display pixels per millimetre.
        feature_offset: Border in pixels reserved around the room for
            wall-feature glyphs.
        delete_control_size: Edge length in pixels of a feature's delete control.
        min_width: Smallest permitted room width in mm.
        max_width: Largest permitted room width in mm.
        min_depth: Smallest permitted room depth in mm.
        max_depth: Largest permitted room depth in mm.
        min_height: Smallest permitted room height in mm.
        max_height: Largest permitted room height in mm.
        default_mats: Floor-mat count of a new room.
        default_shape: Aspect preset of a new room.
        default_height: Height of a new room in mm.
    """

    scale: float = 0.1  # 1 mm = 0.1 px
    feature_offset: float = 30.0
    delete_control_size: float = 14.0
    min_width: float = 2000.0
    max_width: float = 5000.0
    min_depth: float = 2000.0
    max_depth: float = 5000.0
    min_height: float = 2000.0
    max_height: float = 3000.0
    default_mats: int = 6
    default_shape: RoomShape = RoomShape.SQUARE
    default_height: float = 2500.0

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ValueError("Scale must be positive")
        if self.feature_offset < 0:
            raise ValueError("Feature offset must be non-negative")
        if self.delete_control_size <= 0:
            raise ValueError("Delete control size must be positive")
        if self.min_width > self.max_width:
            raise ValueError("min_width cannot exceed max_width")
        if self.min_depth > self.max_depth:
            raise ValueError("min_depth cannot exceed max_depth")
        if self.min_height > self.max_height:
            raise ValueError("min_height cannot exceed max_height")

    def size_constraints(self) -> SizeConstraints:
        """Room size constraints built from the min/max settings."""
        return SizeConstraints(
            width=DimensionRange(self.min_width, self.max_width),
            depth=DimensionRange(self.min_depth, self.max_depth),
            height=DimensionRange(self.min_height, self.max_height),
        )

    def create_room(self) -> Room:
        """A constrained room sized from the default mat count and shape."""
        constraints = self.size_constraints()
        width, depth = room_size_from_mats(
            self.default_mats, self.default_shape, constraints
        )
        room = Room(width=width, depth=depth, height=self.default_height)
        room.set_size_constraints(constraints)
        return room
