"""Biome page routes.

Visiting a biome page records it in the session so the landing page
carousel reopens on it, and returns the sticky links to its neighbors.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import AppState, get_carousel_host
from src.api.routes.carousel import http_error
from src.api.schemas import ErrorResponse, ItemSummary, PageResponse
from src.core.biomes import get_biome, neighbors_for
from src.core.carousel_logic import Item
from src.core.errors import ItemNotFoundError
from src.core.logging import bind_contextvars, clear_contextvars, get_logger
from src.core.persistence import PersistenceBridge

logger = get_logger(__name__)

router = APIRouter(prefix="/sessions", tags=["pages"])


def _summary(item: Item) -> ItemSummary:
    return ItemSummary(id=item.id, label=item.label, url=item.target_url)


@router.get(
    "/{session_id}/pages/{item_id}",
    response_model=PageResponse,
    responses={404: {"model": ErrorResponse, "description": "Unknown biome"}},
)
async def visit_page(
    session_id: str,
    item_id: str,
    host: AppState = Depends(get_carousel_host),
) -> PageResponse:
    """Visit a biome page."""
    bind_contextvars(session_id=session_id)
    try:
        try:
            item = get_biome(item_id, host.items)
            prev_item, next_item = neighbors_for(item_id, host.items)
        except ItemNotFoundError as ex:
            logger.info("page_not_found", item_id=item_id)
            raise http_error(ex) from ex

        bridge = PersistenceBridge(
            host.sessions.get_or_create(session_id), host.config.storage_key
        )
        bridge.record_visit(item.id)
        logger.info("page_visited", item_id=item.id)

        return PageResponse(
            item=_summary(item),
            prev=_summary(prev_item),
            next=_summary(next_item),
        )
    finally:
        clear_contextvars()
