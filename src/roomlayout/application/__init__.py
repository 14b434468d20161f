"""Application layer - layout session, drag protocol and persistence."""

from .drag import DragController, DragState
from .engine import LayoutEngine
from .settings import LayoutSettings

__all__ = [
    "DragController",
    "DragState",
    "LayoutEngine",
    "LayoutSettings",
]
