"""FastAPI dependency injection for layout sessions."""

from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends

from roomlayout.application import LayoutEngine, LayoutSettings
from roomlayout.application.config import load_layout_from_dict


@lru_cache(maxsize=1)
def get_settings() -> LayoutSettings:
    """Get cached LayoutSettings instance."""
    return LayoutSettings()


def engine_from_layout(layout: dict[str, Any], settings: LayoutSettings) -> LayoutEngine:
    """Build a fresh engine holding the given layout document.

    Raises:
        LayoutParseError: If the document is malformed.
        DimensionOutOfRange: If the room size is outside the permitted range.
    """
    engine = LayoutEngine(settings=settings)
    load_layout_from_dict(engine, layout)
    return engine


# Type aliases for cleaner endpoint signatures
SettingsDep = Annotated[LayoutSettings, Depends(get_settings)]
