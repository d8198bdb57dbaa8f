"""API routes package."""

from app.routes.files import router as files_router
from app.routes.health import router as health_router

__all__ = ["files_router", "health_router"]
