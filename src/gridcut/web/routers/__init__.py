"""API routers for the REST API."""

from gridcut.web.routers.export import router as export_router
from gridcut.web.routers.layout import router as layout_router
from gridcut.web.routers.presets import router as presets_router
from gridcut.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "layout_router",
    "presets_router",
    "validate_router",
]
