"""HTTP API package.

This module provides a FastAPI-based HTTP API that hosts one landing page
carousel per browser session.
"""

from src.api.app import create_app
from src.api.dependencies import AppState, get_app_state, get_carousel_host

__all__ = [
    "AppState",
    "create_app",
    "get_app_state",
    "get_carousel_host",
]
