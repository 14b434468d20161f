"""FastAPI REST API for room layouts.

This module provides a stateless REST API: every request carries a layout
document and every successful mutation returns the updated document.

Usage:
    uvicorn roomlayout.web:app --reload
"""

from roomlayout.web.app import app, create_app

__all__ = ["app", "create_app"]
