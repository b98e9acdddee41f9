"""Health check routes for the HTTP API.

These routes provide health and liveness endpoints for container
orchestration and monitoring systems.
"""

from typing import Any

from fastapi import APIRouter, Request, Response

from src.api.dependencies import get_app_state
from src.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request, response: Response) -> dict[str, Any]:
    """Health check reporting whether the carousel host is ready.

    Returns 200 once the app state is initialized, 503 otherwise.
    """
    app_state = get_app_state()
    healthy = app_state.is_initialized
    response.status_code = 200 if healthy else 503

    logger.debug("health_check", healthy=healthy)

    return {
        "status": "healthy" if healthy else "unhealthy",
        "version": request.app.version,
        "carousels": app_state.carousel_count,
    }


@router.get("/live")
async def liveness_check() -> dict[str, bool]:
    """Liveness probe for Kubernetes/container orchestration.

    Returns 200 if the service is alive (not deadlocked).
    """
    return {"alive": True}
