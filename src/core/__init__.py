"""Core carousel logic.

This module contains the platform-agnostic carousel engine: cyclic index
arithmetic, the label guard, the transition state machine, input adapters,
and session persistence.
"""

from src.core.biomes import DEFAULT_BIOMES, biome_from_title, get_biome, neighbors_for
from src.core.carousel_logic import (
    CarouselModel,
    CarouselState,
    Direction,
    Item,
    Role,
    SlotIndices,
)
from src.core.config import CarouselConfig, load_config
from src.core.content_guard import ContentVisibilityGuard
from src.core.controller import CarouselController, items_from_container, setup_carousel
from src.core.errors import (
    CarouselError,
    ContentGuardError,
    DuplicateItemError,
    ErrorCategory,
    InvalidInputError,
    ItemNotFoundError,
    UnsupportedItemCountError,
    classify_error,
)
from src.core.input_adapters import (
    ClickAdapter,
    KeyboardAdapter,
    Signal,
    TouchAdapter,
    WheelAdapter,
)
from src.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from src.core.persistence import PersistenceBridge
from src.core.transitions import EngineState, TransitionEngine

__all__ = [
    # Model
    "CarouselModel",
    "CarouselState",
    "Direction",
    "Item",
    "Role",
    "SlotIndices",
    # Engine
    "ContentVisibilityGuard",
    "EngineState",
    "TransitionEngine",
    # Setup
    "CarouselController",
    "items_from_container",
    "setup_carousel",
    # Input
    "ClickAdapter",
    "KeyboardAdapter",
    "Signal",
    "TouchAdapter",
    "WheelAdapter",
    # Persistence
    "PersistenceBridge",
    # Biome catalog
    "DEFAULT_BIOMES",
    "biome_from_title",
    "get_biome",
    "neighbors_for",
    # Configuration
    "CarouselConfig",
    "load_config",
    # Error handling
    "CarouselError",
    "ContentGuardError",
    "DuplicateItemError",
    "ErrorCategory",
    "InvalidInputError",
    "ItemNotFoundError",
    "UnsupportedItemCountError",
    "classify_error",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
]
