"""Carousel configuration loaded from environment variables."""

from dataclasses import dataclass
from os import getenv

# Duration (ms) the carousel stays locked after a transition
UI_LOCKED_DURATION = 500
# Minimum horizontal travel (px) for a swipe to count
SWIPE_THRESHOLD = 50
# Session key written by biome pages and read on page load
ACTIVE_ITEM_KEY = "activeBiome"
# Destination page for an item, keyed by item id
PAGE_URL_TEMPLATE = "pages/{id}.html"


@dataclass(frozen=True)
class CarouselConfig:
    """Tunable carousel settings.

    Attributes:
        lock_duration_ms: How long input stays locked after a transition.
        swipe_threshold_px: Minimum horizontal swipe distance.
        storage_key: Session storage key holding the last active item id.
        page_url_template: Format string producing an item's destination URL.
    """

    lock_duration_ms: int = UI_LOCKED_DURATION
    swipe_threshold_px: int = SWIPE_THRESHOLD
    storage_key: str = ACTIVE_ITEM_KEY
    page_url_template: str = PAGE_URL_TEMPLATE

    @property
    def lock_duration_seconds(self) -> float:
        return self.lock_duration_ms / 1000

    def page_url(self, item_id: str) -> str:
        """Build the destination URL for an item."""
        return self.page_url_template.format(id=item_id)


def load_config() -> CarouselConfig:
    """Load carousel settings from the environment.

    Reads CAROUSEL_LOCK_MS, CAROUSEL_SWIPE_THRESHOLD_PX, CAROUSEL_STORAGE_KEY
    and CAROUSEL_PAGE_URL_TEMPLATE, falling back to the defaults above.
    """
    return CarouselConfig(
        lock_duration_ms=int(getenv("CAROUSEL_LOCK_MS", str(UI_LOCKED_DURATION))),
        swipe_threshold_px=int(
            getenv("CAROUSEL_SWIPE_THRESHOLD_PX", str(SWIPE_THRESHOLD))
        ),
        storage_key=getenv("CAROUSEL_STORAGE_KEY", ACTIVE_ITEM_KEY),
        page_url_template=getenv("CAROUSEL_PAGE_URL_TEMPLATE", PAGE_URL_TEMPLATE),
    )
