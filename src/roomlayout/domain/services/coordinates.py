"""Conversion between display-surface pixels and room millimetres."""

from __future__ import annotations

from ..entities import Room
from ..value_objects import Point2D

__all__ = ["CoordinateSpace"]


class CoordinateSpace:
    """Maps a centred, bordered display surface onto room coordinates.

    The room rectangle is drawn centred on its surface with a fixed border
    of ``feature_offset`` pixels on every side, reserved for wall-feature
    glyphs and their delete controls. For each axis::

        center_offset = (surface_px - (room_px + 2 * feature_offset)) / 2
        room_mm = (pixel - center_offset - feature_offset) / scale

    No clamping is done; callers clamp against the room bounds. The room is
    held by reference so a resize is picked up immediately.

    Attributes:
        room: The room being displayed.
        scale: Pixels per millimetre.
        feature_offset: Border width in pixels.
    """

    def __init__(self, room: Room, scale: float, feature_offset: float) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        if feature_offset < 0:
            raise ValueError("Feature offset cannot be negative")
        self.room = room
        self.scale = scale
        self.feature_offset = feature_offset

    @property
    def room_size_px(self) -> tuple[float, float]:
        """Room width and depth in pixels."""
        return self.room.width * self.scale, self.room.depth * self.scale

    def center_offset(self, surface_width_px: float, surface_height_px: float) -> Point2D:
        """Offset of the bordered room rectangle from the surface corner."""
        room_w, room_d = self.room_size_px
        total_w = room_w + self.feature_offset * 2
        total_d = room_d + self.feature_offset * 2
        return Point2D(
            (surface_width_px - total_w) / 2,
            (surface_height_px - total_d) / 2,
        )

    def room_origin_px(self, surface_width_px: float, surface_height_px: float) -> Point2D:
        """Surface pixel position of the room's (0, 0) corner."""
        center = self.center_offset(surface_width_px, surface_height_px)
        return Point2D(center.x + self.feature_offset, center.y + self.feature_offset)

    def to_room_coordinates(
        self,
        pixel_x: float,
        pixel_y: float,
        surface_width_px: float,
        surface_height_px: float,
    ) -> Point2D:
        """Convert a surface pixel to room millimetres."""
        origin = self.room_origin_px(surface_width_px, surface_height_px)
        return Point2D(
            (pixel_x - origin.x) / self.scale,
            (pixel_y - origin.y) / self.scale,
        )

    def to_display_coordinates(
        self,
        room_x: float,
        room_y: float,
        surface_width_px: float,
        surface_height_px: float,
    ) -> Point2D:
        """Convert room millimetres to a surface pixel."""
        origin = self.room_origin_px(surface_width_px, surface_height_px)
        return Point2D(
            origin.x + room_x * self.scale,
            origin.y + room_y * self.scale,
        )
