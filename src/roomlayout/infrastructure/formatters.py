"""Text formatters for room layouts.

ASCII diagrams of the top, front and side views and a tabular listing of
objects, features and groups, used by the CLI and the web render endpoint.
"""

from __future__ import annotations

import string
from collections.abc import Sequence

from roomlayout.domain import (
    FeatureType,
    LayoutObject,
    ObjectGroup,
    Room,
    RoomFeature,
    ViewType,
    Wall,
)

__all__ = ["LayoutDiagramFormatter", "LayoutTableFormatter", "object_label"]

_LABELS = string.digits[1:] + string.ascii_uppercase

_FEATURE_MARKS = {
    FeatureType.WINDOW: "W",
    FeatureType.DOOR: "D",
    FeatureType.CLOSET: "C",
}


def object_label(index: int) -> str:
    """Single-character label for the object at ``index`` in drawing order."""
    if index < len(_LABELS):
        return _LABELS[index]
    return "#"


class LayoutDiagramFormatter:
    """Formats ASCII diagrams of a room seen from above, the front or the side.

    The top view spans width x depth with features marked on the border;
    the front view spans width x height and the side view depth x height,
    both with the floor at the bottom.
    """

    def format(
        self,
        room: Room,
        objects: Sequence[LayoutObject],
        features: Sequence[RoomFeature] = (),
        view: ViewType = ViewType.TOP,
        width: int = 60,
        height: int = 20,
    ) -> str:
        """Generate an ASCII diagram of one view."""
        view = ViewType(view)
        match view:
            case ViewType.TOP:
                title = "TOP VIEW"
                span_h, span_v = room.width, room.depth
                caption = f"{room.width:g}mm x {room.depth:g}mm"
            case ViewType.FRONT:
                title = "FRONT VIEW"
                span_h, span_v = room.width, room.height
                caption = f"{room.width:g}mm x {room.height:g}mm"
            case ViewType.SIDE:
                title = "SIDE VIEW"
                span_h, span_v = room.depth, room.height
                caption = f"{room.depth:g}mm x {room.height:g}mm"

        lines = [
            f"{title} ({caption})",
            "=" * width,
            "",
        ]

        grid = [[" " for _ in range(width)] for _ in range(height)]
        self._draw_box(grid, 0, 0, width - 1, height - 1)

        for index, obj in enumerate(objects):
            match view:
                case ViewType.TOP:
                    h0, h1 = obj.x, obj.x + obj.w
                    v0, v1 = obj.y, obj.y + obj.d
                case ViewType.FRONT:
                    h0, h1 = obj.x, obj.x + obj.w
                    v0, v1 = room.height - obj.z - obj.h, room.height - obj.z
                case ViewType.SIDE:
                    h0, h1 = obj.y, obj.y + obj.d
                    v0, v1 = room.height - obj.z - obj.h, room.height - obj.z
            x1 = self._scale(h0, span_h, width)
            x2 = self._scale(h1, span_h, width)
            y1 = self._scale(v0, span_v, height)
            y2 = self._scale(v1, span_v, height)
            if x2 - x1 >= 2 and y2 - y1 >= 2:
                self._draw_box(grid, x1, y1, x2, y2)
            grid[(y1 + y2) // 2][(x1 + x2) // 2] = object_label(index)

        if view is ViewType.TOP:
            for feature in features:
                self._mark_feature(grid, room, feature, width, height)

        for row in grid:
            lines.append("".join(row))

        if objects:
            lines.append("")
            for index, obj in enumerate(objects):
                lines.append(f"  {object_label(index)}: {obj.name or obj.id}")

        return "\n".join(lines)

    @staticmethod
    def _scale(value: float, span: float, cells: int) -> int:
        """Map a millimetre coordinate onto a grid index."""
        index = round(value / span * (cells - 1))
        return max(0, min(cells - 1, index))

    def _mark_feature(
        self,
        grid: list[list[str]],
        room: Room,
        feature: RoomFeature,
        width: int,
        height: int,
    ) -> None:
        mark = _FEATURE_MARKS[feature.type]
        start = feature.position
        end = feature.position + feature.width
        if feature.is_horizontal:
            row = 0 if feature.wall is Wall.TOP else height - 1
            x1 = self._scale(start, room.width, width)
            x2 = self._scale(end, room.width, width)
            for x in range(x1, x2 + 1):
                grid[row][x] = mark
        else:
            col = 0 if feature.wall is Wall.LEFT else width - 1
            y1 = self._scale(start, room.depth, height)
            y2 = self._scale(end, room.depth, height)
            for y in range(y1, y2 + 1):
                grid[y][col] = mark

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        """Draw a box on the grid."""
        # Corners
        grid[y1][x1] = "+"
        grid[y1][x2] = "+"
        grid[y2][x1] = "+"
        grid[y2][x2] = "+"

        for x in range(x1 + 1, x2):
            grid[y1][x] = "-"
            grid[y2][x] = "-"

        for y in range(y1 + 1, y2):
            grid[y][x1] = "|"
            grid[y][x2] = "|"


class LayoutTableFormatter:
    """Formats a listing of the room, its objects, features and groups."""

    def format(
        self,
        room: Room,
        objects: Sequence[LayoutObject],
        features: Sequence[RoomFeature] = (),
        groups: Sequence[ObjectGroup] = (),
    ) -> str:
        lines = [
            "ROOM LAYOUT",
            "=" * 78,
            f"Room: {room.width:g}mm W x {room.depth:g}mm D x {room.height:g}mm H",
            "",
        ]

        group_of = {
            object_id: group.name for group in groups for object_id in group.object_ids
        }

        lines.append(f"Objects ({len(objects)})")
        lines.append("-" * 78)
        if objects:
            lines.append(
                f"{'#':<2} {'Name':<16} {'W x D x H (mm)':<22} {'Position (x, y, z)':<22} {'Stack':<5} Group"
            )
            for index, obj in enumerate(objects):
                size = f"{obj.w:g} x {obj.d:g} x {obj.h:g}"
                position = f"({obj.x:g}, {obj.y:g}, {obj.z:g})"
                stack = "yes" if obj.stackable else "no"
                lines.append(
                    f"{object_label(index):<2} {(obj.name or '-')[:16]:<16} {size:<22} "
                    f"{position:<22} {stack:<5} {group_of.get(obj.id, '-')}"
                )
                lines.append(f"   id: {obj.id}")
        else:
            lines.append("  (none)")
        lines.append("")

        lines.append(f"Features ({len(features)})")
        lines.append("-" * 78)
        if features:
            for index, feature in enumerate(features):
                lines.append(
                    f"{index:<2} {feature.type.value:<8} {feature.wall.value:<7} "
                    f"position {feature.position:g}mm, width {feature.width:g}mm"
                )
        else:
            lines.append("  (none)")
        lines.append("")

        lines.append(f"Groups ({len(groups)})")
        lines.append("-" * 78)
        if groups:
            for group in groups:
                lines.append(f"{group.name} [{group.id}]: {', '.join(group.object_ids)}")
        else:
            lines.append("  (none)")

        return "\n".join(lines)
