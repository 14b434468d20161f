"""Pixel hit testing for the top view.

Wall features are drawn in the border band reserved around the room, each
with a small square delete control in its trailing corner. This module
computes those rectangles and resolves pointer positions to entities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roomlayout.domain import (
    CoordinateSpace,
    FeatureManager,
    LayoutObject,
    ObjectManager,
    Rect,
    RoomFeature,
    Wall,
)

if TYPE_CHECKING:
    from roomlayout.application.engine import LayoutEngine

__all__ = ["SurfaceHitTester"]


class SurfaceHitTester:
    """Resolves surface pixels to layout objects, features and delete controls.

    Feature rectangles are first computed relative to the room origin in
    pixels (so the band above the top wall has negative y), then shifted by
    the room origin on the surface for hit tests.

    Attributes:
        space: Coordinate space of the top view.
        feature_manager: Source of the features to test.
        object_manager: Source of the objects to test.
        delete_control_size: Edge length of the delete control in pixels.
    """

    def __init__(
        self,
        space: CoordinateSpace,
        feature_manager: FeatureManager,
        object_manager: ObjectManager,
        delete_control_size: float = 14.0,
    ) -> None:
        self.space = space
        self.feature_manager = feature_manager
        self.object_manager = object_manager
        self.delete_control_size = delete_control_size

    @classmethod
    def for_engine(cls, engine: LayoutEngine) -> SurfaceHitTester:
        """Build a hit tester over an engine's registries and settings."""
        return cls(
            engine.coordinate_space(),
            engine.feature_manager,
            engine.object_manager,
            engine.settings.delete_control_size,
        )

    def feature_rect(self, feature: RoomFeature) -> Rect:
        """Glyph rectangle of a feature in room-origin pixels."""
        room = self.space.room
        scale = self.space.scale
        offset = self.space.feature_offset
        room_w, room_d = self.space.room_size_px
        wall_length = feature.get_wall_length(room)
        position = max(0, min(wall_length - feature.width, feature.position))
        pos = position * scale
        width = feature.width * scale

        match feature.wall:
            case Wall.TOP:
                return Rect(pos, -offset, width, offset)
            case Wall.RIGHT:
                return Rect(room_w, pos, offset, width)
            case Wall.BOTTOM:
                return Rect(pos, room_d, width, offset)
            case Wall.LEFT:
                return Rect(-offset, pos, offset, width)

    def delete_control_rect(self, feature: RoomFeature) -> Rect:
        """Delete control square of a feature in room-origin pixels."""
        size = self.delete_control_size
        offset = self.space.feature_offset
        glyph = self.feature_rect(feature)
        room_w, room_d = self.space.room_size_px

        match feature.wall:
            case Wall.TOP:
                return Rect(glyph.right - size, -offset, size, size)
            case Wall.RIGHT:
                return Rect(room_w, glyph.bottom - size, size, size)
            case Wall.BOTTOM:
                return Rect(glyph.right - size, room_d + offset - size, size, size)
            case Wall.LEFT:
                return Rect(-offset, glyph.bottom - size, size, size)

    def _to_surface(self, rect: Rect, surface_width: float, surface_height: float) -> Rect:
        origin = self.space.room_origin_px(surface_width, surface_height)
        return Rect(rect.x + origin.x, rect.y + origin.y, rect.w, rect.d)

    def feature_surface_rect(
        self, feature: RoomFeature, surface_width: float, surface_height: float
    ) -> Rect:
        """Glyph rectangle of a feature in surface pixels."""
        return self._to_surface(self.feature_rect(feature), surface_width, surface_height)

    def delete_control_surface_rect(
        self, feature: RoomFeature, surface_width: float, surface_height: float
    ) -> Rect:
        """Delete control square of a feature in surface pixels."""
        return self._to_surface(
            self.delete_control_rect(feature), surface_width, surface_height
        )

    def resolve_delete_control_at(
        self,
        pixel_x: float,
        pixel_y: float,
        surface_width: float,
        surface_height: float,
    ) -> RoomFeature | None:
        """Feature whose delete control is under the pointer, topmost first."""
        return self.feature_manager.find_at(
            pixel_x,
            pixel_y,
            lambda f: self.delete_control_surface_rect(f, surface_width, surface_height),
        )

    def resolve_feature_at(
        self,
        pixel_x: float,
        pixel_y: float,
        surface_width: float,
        surface_height: float,
    ) -> RoomFeature | None:
        """Feature whose glyph is under the pointer, topmost first."""
        return self.feature_manager.find_at(
            pixel_x,
            pixel_y,
            lambda f: self.feature_surface_rect(f, surface_width, surface_height),
        )

    def resolve_entity_at(
        self,
        pixel_x: float,
        pixel_y: float,
        surface_width: float,
        surface_height: float,
    ) -> LayoutObject | RoomFeature | None:
        """Entity under the pointer.

        Feature glyphs are tested before objects, matching the order in
        which a pointer-down picks what to drag.
        """
        feature = self.resolve_feature_at(pixel_x, pixel_y, surface_width, surface_height)
        if feature is not None:
            return feature
        point = self.space.to_room_coordinates(
            pixel_x, pixel_y, surface_width, surface_height
        )
        return self.object_manager.get_object_at(point.x, point.y)
