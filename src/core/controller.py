"""Landing page carousel setup.

``setup_carousel`` is called once per page load. It reads the last visited
item from session storage, builds the transition engine over the rendered
item elements, and binds every input adapter to it for the page's lifetime.
"""

from collections.abc import Sequence

from src.core.carousel_logic import Item
from src.core.config import CarouselConfig
from src.core.input_adapters import (
    ClickAdapter,
    KeyboardAdapter,
    Signal,
    TouchAdapter,
    WheelAdapter,
)
from src.core.logging import get_logger
from src.core.persistence import PersistenceBridge
from src.core.transitions import TransitionEngine
from src.ports.dom import CarouselContainer, Navigator, Scheduler
from src.ports.session import SessionStore

logger = get_logger(__name__)


def items_from_container(
    container: CarouselContainer, config: CarouselConfig | None = None
) -> list[Item]:
    """Build items from rendered elements: id, displayed text, page URL."""
    config = config or CarouselConfig()
    return [
        Item(id=element.id, label=element.text, target_url=config.page_url(element.id))
        for element in container.children
    ]


class CarouselController:
    """One carousel engine with its four input channels attached."""

    def __init__(self, engine: TransitionEngine, config: CarouselConfig) -> None:
        self.engine = engine
        self.config = config
        self.click = ClickAdapter(engine.role_of, engine.dispatch)
        self.wheel = WheelAdapter(engine.dispatch)
        self.keyboard = KeyboardAdapter(engine.dispatch)
        self.touch = TouchAdapter(engine.dispatch, threshold=config.swipe_threshold_px)

    def on_click(self, element_id: str) -> Signal | None:
        # Clicks never reach the items while pointer interaction is off
        if not self.engine.container.pointer_events:
            logger.debug("click_ignored", element_id=element_id, reason="locked")
            return None
        return self.click.handle(element_id)

    def on_wheel(self, delta_x: float = 0.0, delta_y: float = 0.0) -> Signal | None:
        return self.wheel.handle(delta_x, delta_y)

    def on_key(self, key: str) -> Signal | None:
        return self.keyboard.handle(key)

    def on_touch_start(self, x: float, y: float) -> None:
        self.touch.start(x, y)

    def on_touch_move(self, x: float, y: float) -> None:
        self.touch.move(x, y)

    def on_touch_end(self, x: float | None = None, y: float | None = None) -> Signal | None:
        return self.touch.end(x, y)


def setup_carousel(
    container: CarouselContainer | None,
    store: SessionStore,
    navigator: Navigator,
    scheduler: Scheduler,
    config: CarouselConfig | None = None,
    items: Sequence[Item] | None = None,
) -> CarouselController | None:
    """Build the carousel for a freshly loaded landing page.

    Args:
        container: Element holding the item elements, or None if the page
            has no carousel.
        store: Session storage shared with the biome pages.
        navigator: Used to open a biome page.
        scheduler: Timer used for the lock window.
        config: Carousel settings; defaults apply when omitted.
        items: Explicit items; derived from the container when omitted.

    Returns:
        The controller, or None when there is no container to drive.
    """
    if container is None:
        logger.info("carousel_setup_skipped", reason="container_missing")
        return None

    config = config or CarouselConfig()
    if items is None:
        items = items_from_container(container, config)

    bridge = PersistenceBridge(store, config.storage_key)
    initial_index = bridge.initial_index(items)

    engine = TransitionEngine(
        items,
        container,
        navigator,
        scheduler,
        initial_index=initial_index,
        lock_duration=config.lock_duration_seconds,
    )
    return CarouselController(engine, config)
