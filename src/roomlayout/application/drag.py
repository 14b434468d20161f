"""Pointer-driven drag protocol for the top view.

The controller turns pointer events on the display surface into engine
mutations. Each pointer-move step is validated in full before anything is
written, so cancelling a drag never needs a rollback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from roomlayout.application.engine import LayoutEngine
from roomlayout.domain import CoordinateSpace, LayoutObject, Point2D, RoomFeature

logger = logging.getLogger(__name__)

__all__ = ["DragController", "DragState", "HitTester"]


class DragState(str, Enum):
    """What the pointer is currently dragging."""

    IDLE = "idle"
    DRAGGING_OBJECT = "dragging_object"
    DRAGGING_FEATURE = "dragging_feature"


class HitTester(Protocol):
    """Surface hit-test helper the controller depends on."""

    def resolve_delete_control_at(
        self, pixel_x: float, pixel_y: float, surface_width: float, surface_height: float
    ) -> RoomFeature | None: ...

    def resolve_feature_at(
        self, pixel_x: float, pixel_y: float, surface_width: float, surface_height: float
    ) -> RoomFeature | None: ...


@dataclass
class _ObjectGrab:
    obj: LayoutObject
    offset_x: float
    offset_y: float


@dataclass
class _FeatureGrab:
    feature: RoomFeature
    offset: float


class DragController:
    """State machine for dragging objects and wall features.

    Pointer-down picks, in order: a feature delete control (the feature
    is removed and no drag starts), a feature glyph, then the topmost
    object under the pointer. Pointer-up and pointer-leave end any drag.

    Attributes:
        engine: The layout session being edited.
        space: Coordinate space of the surface.
        hit_tester: Resolves pixels to features and delete controls.
        on_double_click: Optional callback receiving a double-clicked object.
    """

    def __init__(
        self,
        engine: LayoutEngine,
        coordinate_space: CoordinateSpace,
        hit_tester: HitTester,
        on_double_click: Callable[[LayoutObject], None] | None = None,
    ) -> None:
        self.engine = engine
        self.space = coordinate_space
        self.hit_tester = hit_tester
        self.on_double_click = on_double_click
        self._object_grab: _ObjectGrab | None = None
        self._feature_grab: _FeatureGrab | None = None

    @property
    def state(self) -> DragState:
        if self._feature_grab is not None:
            return DragState.DRAGGING_FEATURE
        if self._object_grab is not None:
            return DragState.DRAGGING_OBJECT
        return DragState.IDLE

    @property
    def dragged_object(self) -> LayoutObject | None:
        return self._object_grab.obj if self._object_grab else None

    @property
    def dragged_feature(self) -> RoomFeature | None:
        return self._feature_grab.feature if self._feature_grab else None

    def _room_point(
        self, pixel_x: float, pixel_y: float, surface_width: float, surface_height: float
    ) -> Point2D:
        return self.space.to_room_coordinates(
            pixel_x, pixel_y, surface_width, surface_height
        )

    def pointer_down(
        self, pixel_x: float, pixel_y: float, surface_width: float, surface_height: float
    ) -> DragState:
        """Start a drag (or delete a feature) at a surface pixel."""
        self.reset()
        point = self._room_point(pixel_x, pixel_y, surface_width, surface_height)

        doomed = self.hit_tester.resolve_delete_control_at(
            pixel_x, pixel_y, surface_width, surface_height
        )
        if doomed is not None:
            self.engine.remove_feature(doomed)
            return self.state

        feature = self.hit_tester.resolve_feature_at(
            pixel_x, pixel_y, surface_width, surface_height
        )
        if feature is not None:
            center = feature.position + feature.width / 2
            along = point.x if feature.is_horizontal else point.y
            self._feature_grab = _FeatureGrab(feature, along - center)
            return self.state

        obj = self.engine.object_at(point.x, point.y)
        if obj is not None:
            self._object_grab = _ObjectGrab(obj, point.x - obj.x, point.y - obj.y)
        return self.state

    def pointer_move(
        self, pixel_x: float, pixel_y: float, surface_width: float, surface_height: float
    ) -> bool:
        """Advance the current drag by one step.

        Returns:
            True if the step was committed, False if nothing is dragged or
            the step was rejected (the previous position is kept).
        """
        point = self._room_point(pixel_x, pixel_y, surface_width, surface_height)

        if self._feature_grab is not None:
            grab = self._feature_grab
            along = point.x if grab.feature.is_horizontal else point.y
            self.engine.move_feature(grab.feature, along - grab.offset)
            return True

        if self._object_grab is None:
            return False
        return self._move_object(self._object_grab, point)

    def _move_object(self, grab: _ObjectGrab, point: Point2D) -> bool:
        obj = grab.obj
        room = self.engine.room
        if obj.id not in self.engine.object_manager:
            self.reset()
            return False

        new_x = max(0, min(room.width - obj.w, point.x - grab.offset_x))
        new_y = max(0, min(room.depth - obj.d, point.y - grab.offset_y))

        group = self.engine.group_for_object(obj.id)
        if group is not None:
            dx = new_x - obj.x
            dy = new_y - obj.y
            if dx == 0 and dy == 0:
                return False
            return self.engine.move_group(group.id, dx, dy, check_overlap=True)

        if not self.engine.can_place(obj, new_x, new_y):
            logger.debug(f"Drag step of {obj.id} to ({new_x}, {new_y}) blocked")
            return False
        self.engine.move_object(obj.id, new_x, new_y)
        return True

    def pointer_up(self) -> None:
        self.reset()

    def pointer_leave(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget any drag in progress."""
        self._object_grab = None
        self._feature_grab = None

    def double_click(
        self, pixel_x: float, pixel_y: float, surface_width: float, surface_height: float
    ) -> LayoutObject | None:
        """Object under the pointer, also passed to ``on_double_click``."""
        point = self._room_point(pixel_x, pixel_y, surface_width, surface_height)
        obj = self.engine.object_at(point.x, point.y)
        if obj is not None and self.on_double_click is not None:
            self.on_double_click(obj)
        return obj
