"""Bridge between the carousel and session storage.

Biome pages record themselves as the last visited item when the user lands
on them; the landing page reads that value once when the carousel is built,
so returning to the landing page shows the biome the user just left.
"""

from collections.abc import Sequence

from src.core.carousel_logic import Item
from src.core.config import ACTIVE_ITEM_KEY
from src.core.logging import get_logger
from src.ports.session import SessionStore

logger = get_logger(__name__)


class PersistenceBridge:
    """Reads and writes the last active item id."""

    def __init__(self, store: SessionStore, key: str = ACTIVE_ITEM_KEY) -> None:
        self._store = store
        self.key = key

    def load(self) -> str | None:
        """Return the persisted item id, or None when nothing was stored."""
        value = self._store.get_item(self.key)
        return value or None

    def record_visit(self, item_id: str) -> None:
        """Remember ``item_id`` as the last visited item."""
        self._store.set_item(self.key, item_id)
        logger.debug("visit_recorded", key=self.key, item_id=item_id)

    def resolve_initial_index(
        self, item_id: str | None, items: Sequence[Item]
    ) -> int:
        """Return the index of ``item_id`` in ``items``, or 0 if absent."""
        if item_id is None:
            return 0
        for index, item in enumerate(items):
            if item.id == item_id:
                return index
        logger.info("persisted_item_unmatched", item_id=item_id)
        return 0

    def initial_index(self, items: Sequence[Item]) -> int:
        """Load the persisted id and resolve it against ``items``."""
        return self.resolve_initial_index(self.load(), items)
