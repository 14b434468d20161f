"""Infrastructure layer - hit testing and text output."""

from .formatters import LayoutDiagramFormatter, LayoutTableFormatter, object_label
from .hit_testing import SurfaceHitTester

__all__ = [
    "LayoutDiagramFormatter",
    "LayoutTableFormatter",
    "SurfaceHitTester",
    "object_label",
]
