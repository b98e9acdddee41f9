"""FastAPI application for hosting landing page carousels.

Example:
    from src.api import create_app

    app = create_app()

    # Run with uvicorn:
    # uvicorn src.api.app:app --reload
"""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.dependencies import get_app_state
from src.api.routes import carousel_router, health_router, pages_router
from src.api.routes.carousel import status_for
from src.core.config import load_config
from src.core.errors import CarouselError
from src.core.logging import get_logger

logger = get_logger(__name__)

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up shared carousel state on startup and drop it on shutdown."""
    app_state = get_app_state()
    config = load_config()
    await app_state.initialize(config=config)
    logger.info("api_started", version=APP_VERSION, storage_key=config.storage_key)

    yield

    await app_state.shutdown()
    logger.info("api_shutdown_complete")


async def carousel_error_handler(request: Request, ex: Exception) -> JSONResponse:
    """Answer carousel errors that escaped a route with a categorized status."""
    assert isinstance(ex, CarouselError)
    code = status_for(ex.category)
    logger.error(
        "unhandled_carousel_error",
        path=request.url.path,
        category=ex.category.name,
        error=str(ex),
    )
    return JSONResponse(status_code=code, content={"detail": str(ex)})


def _origins_from_env() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    if raw == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(
    title: str = "Biome Carousel API",
    description: str = "Landing page carousel for Whispers of the Biomes",
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        title: API title for OpenAPI docs.
        description: API description for OpenAPI docs.
        cors_origins: Allowed CORS origins. Defaults to the comma-separated
            CORS_ORIGINS env var, or ["*"] when unset.
    """
    app = FastAPI(
        title=title,
        description=description,
        version=APP_VERSION,
        lifespan=lifespan,
    )

    if cors_origins is None:
        cors_origins = _origins_from_env()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CarouselError, carousel_error_handler)

    app.include_router(health_router)
    app.include_router(carousel_router)
    app.include_router(pages_router)

    logger.debug("app_configured", title=title, cors_origins=cors_origins)
    return app


# Default app instance for uvicorn
app = create_app()
