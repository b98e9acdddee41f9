"""FastAPI dependency injection for the carousel host.

The API hosts one landing page per browser session. ``AppState`` keeps the
session storage registry and the carousel currently loaded for each session.

Example:
    from fastapi import Depends
    from src.api.dependencies import AppState, get_carousel_host

    @router.get("/sessions/{session_id}/carousel")
    async def view(session_id: str, host: AppState = Depends(get_carousel_host)):
        session = host.get_carousel(session_id)
"""

from collections.abc import AsyncGenerator, Sequence
from dataclasses import dataclass

from src.adapters import (
    AsyncioScheduler,
    MemoryContainer,
    MemorySessionRegistry,
    RecordingNavigator,
)
from src.core.biomes import DEFAULT_BIOMES
from src.core.carousel_logic import Item
from src.core.config import CarouselConfig, load_config
from src.core.controller import CarouselController, setup_carousel
from src.core.logging import get_logger
from src.ports.dom import Scheduler

logger = get_logger(__name__)


@dataclass
class CarouselSession:
    """The landing page loaded for one browser session."""

    controller: CarouselController
    container: MemoryContainer
    navigator: RecordingNavigator


class AppState:
    """Application state container for shared resources.

    This class holds the session storage registry and the loaded carousels
    shared across all request handlers.
    """

    def __init__(self) -> None:
        self._config: CarouselConfig | None = None
        self._items: tuple[Item, ...] = ()
        self._sessions: MemorySessionRegistry | None = None
        self._scheduler: Scheduler | None = None
        self._carousels: dict[str, CarouselSession] = {}
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Check if the app state has been initialized."""
        return self._initialized

    async def initialize(
        self,
        config: CarouselConfig | None = None,
        items: Sequence[Item] | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Initialize storage and carousel settings.

        Args:
            config: Carousel settings (or None to read the environment).
            items: Carousel items (or None for the deployed biomes).
            scheduler: Lock-window scheduler (or None for the event loop).
        """
        if self._initialized:
            logger.warning("app_state_already_initialized")
            return

        self._config = config or load_config()
        self._items = tuple(items) if items is not None else DEFAULT_BIOMES
        self._sessions = MemorySessionRegistry()
        self._scheduler = scheduler or AsyncioScheduler()

        self._initialized = True
        logger.info(
            "app_state_initialized",
            items=[item.id for item in self._items],
            lock_duration_ms=self._config.lock_duration_ms,
        )

    async def shutdown(self) -> None:
        """Drop all sessions and loaded carousels."""
        self._carousels.clear()
        if self._sessions is not None:
            self._sessions.clear()
        self._initialized = False
        logger.info("app_state_shutdown")

    @property
    def config(self) -> CarouselConfig:
        """Get the carousel configuration."""
        if self._config is None:
            raise RuntimeError("App state not initialized")
        return self._config

    @property
    def items(self) -> tuple[Item, ...]:
        """Get the carousel items."""
        if not self._initialized:
            raise RuntimeError("App state not initialized")
        return self._items

    @property
    def sessions(self) -> MemorySessionRegistry:
        """Get the session storage registry."""
        if self._sessions is None:
            raise RuntimeError("App state not initialized")
        return self._sessions

    @property
    def scheduler(self) -> Scheduler:
        """Get the lock-window scheduler."""
        if self._scheduler is None:
            raise RuntimeError("App state not initialized")
        return self._scheduler

    @property
    def carousel_count(self) -> int:
        return len(self._carousels)

    def load_carousel(self, session_id: str) -> CarouselSession:
        """Load the landing page for a session, replacing any earlier load."""
        container = MemoryContainer.from_items(self.items)
        navigator = RecordingNavigator()
        controller = setup_carousel(
            container,
            self.sessions.get_or_create(session_id),
            navigator,
            self.scheduler,
            config=self.config,
            items=self.items,
        )
        if controller is None:
            raise RuntimeError("Carousel container missing")

        session = CarouselSession(
            controller=controller, container=container, navigator=navigator
        )
        self._carousels[session_id] = session
        return session

    def get_carousel(self, session_id: str) -> CarouselSession | None:
        """Get the carousel loaded for a session, if any."""
        return self._carousels.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Forget a session's carousel and its session storage.

        Returns:
            True if the session had a carousel or stored values.
        """
        had_carousel = self._carousels.pop(session_id, None) is not None
        had_store = session_id in self.sessions
        self.sessions.drop(session_id)
        return had_carousel or had_store


# Global app state instance
_app_state = AppState()


def get_app_state() -> AppState:
    """Get the global app state instance."""
    return _app_state


async def get_carousel_host() -> AsyncGenerator[AppState, None]:
    """FastAPI dependency for the initialized app state."""
    if not _app_state.is_initialized:
        raise RuntimeError("App state not initialized")
    yield _app_state
