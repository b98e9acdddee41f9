"""API routes package.

This module contains all route handlers for the HTTP API.
"""

from src.api.routes.carousel import router as carousel_router
from src.api.routes.health import router as health_router
from src.api.routes.pages import router as pages_router

__all__ = [
    "carousel_router",
    "health_router",
    "pages_router",
]
