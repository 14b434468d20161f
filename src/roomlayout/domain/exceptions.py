"""Errors raised by layout mutations.

Every engine mutation either commits fully or raises one of these, leaving
the arrangement unchanged.
"""


class LayoutError(Exception):
    """Base class for rejected layout mutations."""


class DimensionOutOfRange(LayoutError):
    """Raised when a room size falls outside its permitted range.

    Attributes:
        dimension: Name of the offending dimension ("width", "depth", "height").
        value: The rejected value.
        minimum: Smallest permitted value.
        maximum: Largest permitted value, or None when only a floor applies.
    """

    def __init__(
        self,
        dimension: str,
        value: float,
        minimum: float,
        maximum: float | None = None,
    ) -> None:
        self.dimension = dimension
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if maximum is None:
            message = f"Room {dimension} must be at least {minimum:g}mm (got {value:g}mm)"
        else:
            message = (
                f"Room {dimension} must be between {minimum:g}mm and "
                f"{maximum:g}mm (got {value:g}mm)"
            )
        super().__init__(message)


class OverlapRejected(LayoutError):
    """Raised when a non-stackable object would intersect another one.

    Attributes:
        object_id: Id of the object being placed.
        other_id: Id of the registered object it would overlap.
    """

    def __init__(self, object_id: str, other_id: str) -> None:
        self.object_id = object_id
        self.other_id = other_id
        super().__init__(
            f"Object {object_id} would overlap object {other_id}. "
            "Enable stacking or choose another position."
        )


class InsufficientMembers(LayoutError):
    """Raised when a group would have fewer than two ungrouped members.

    Attributes:
        available_ids: The ids left after excluding already-grouped objects.
    """

    def __init__(self, available_ids: list[str]) -> None:
        self.available_ids = available_ids
        super().__init__(
            "A group needs at least 2 ungrouped objects "
            f"({len(available_ids)} available)"
        )
