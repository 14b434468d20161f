"""API routers for the REST API."""

from roomlayout.web.routers.groups import router as groups_router
from roomlayout.web.routers.objects import router as objects_router
from roomlayout.web.routers.render import router as render_router
from roomlayout.web.routers.room import router as room_router
from roomlayout.web.routers.validate import router as validate_router

__all__ = [
    "groups_router",
    "objects_router",
    "render_router",
    "room_router",
    "validate_router",
]
