"""Room size presets derived from a floor-mat (tatami) count."""

from __future__ import annotations

import math

from ..value_objects import RoomShape, SizeConstraints

__all__ = ["MAT_AREA_MM2", "MAT_COUNT_RANGE", "room_size_from_mats"]

# One mat is roughly 1.62 m2.
MAT_AREA_MM2 = 1_620_000
MAT_COUNT_RANGE = range(5, 9)


def room_size_from_mats(
    mats: int,
    shape: RoomShape = RoomShape.SQUARE,
    constraints: SizeConstraints | None = None,
) -> tuple[int, int]:
    """Compute a room footprint covering ``mats`` floor mats.

    ``VERTICAL`` rooms are deeper than wide (2:3) and ``HORIZONTAL`` rooms
    wider than deep (3:2). Each side is floored to whole millimetres and
    then clamped into the width/depth constraints when given.

    Args:
        mats: Number of mats, 5 to 8.
        shape: Aspect preset.
        constraints: Optional size ranges to clamp into.

    Returns:
        (width, depth) in millimetres.

    Raises:
        ValueError: If ``mats`` is outside the supported range.
    """
    if mats not in MAT_COUNT_RANGE:
        raise ValueError(
            f"Mat count must be between {MAT_COUNT_RANGE.start} and "
            f"{MAT_COUNT_RANGE.stop - 1} (got {mats})"
        )
    area = mats * MAT_AREA_MM2

    match RoomShape(shape):
        case RoomShape.SQUARE:
            width = depth = math.floor(math.sqrt(area))
        case RoomShape.VERTICAL:
            depth = math.floor(math.sqrt(area * 3 / 2))
            width = math.floor(depth * 2 / 3)
        case RoomShape.HORIZONTAL:
            width = math.floor(math.sqrt(area * 3 / 2))
            depth = math.floor(width * 2 / 3)

    if constraints is not None:
        width = int(constraints.width.clamp(width))
        depth = int(constraints.depth.clamp(depth))
    return width, depth
