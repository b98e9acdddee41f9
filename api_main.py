"""Run the biome carousel HTTP server.

Usage:
    python api_main.py

    # Or directly with uvicorn:
    uvicorn src.api.app:app --reload --host 0.0.0.0 --port 8000

Server settings come from API_HOST, API_PORT, API_RELOAD and API_WORKERS.
Carousel behaviour is tuned with CAROUSEL_LOCK_MS, CAROUSEL_SWIPE_THRESHOLD_PX,
CAROUSEL_STORAGE_KEY and CAROUSEL_PAGE_URL_TEMPLATE.
"""

import os

import uvicorn

from src.core.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)


def main() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    reload = os.getenv("API_RELOAD", "false").lower() == "true"
    # Carousels live in process memory; extra workers would split sessions
    workers = 1 if reload else int(os.getenv("API_WORKERS", "1"))

    logger.info("server_starting", host=host, port=port, reload=reload, workers=workers)
    uvicorn.run("src.api.app:app", host=host, port=port, reload=reload, workers=workers)


if __name__ == "__main__":
    main()
