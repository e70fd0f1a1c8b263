"""API routers package."""

from .plugins import router as plugins_router
from .themes import router as themes_router

__all__ = ["plugins_router", "themes_router"]
