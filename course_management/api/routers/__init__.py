"""API routers."""

from .health import router as health_router
from .lessons import router as lessons_router

__all__ = [
    "health_router",
    "lessons_router",
]
