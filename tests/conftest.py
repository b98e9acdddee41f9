"""Shared pytest fixtures for biome carousel tests."""

import pytest

from src.adapters import MemoryContainer, MemorySessionStore, RecordingNavigator
from src.core.biomes import DEFAULT_BIOMES
from src.core.carousel_logic import Item
from src.core.controller import CarouselController, setup_carousel
from src.core.transitions import TransitionEngine
from tests.mocks.scheduling import ManualScheduler


@pytest.fixture
def biome_items() -> tuple[Item, ...]:
    """Provide the deployed biome catalog: forest, mesa, caldera, marine, tundra.

    Returns:
        tuple[Item, ...]: The five biome items in display order.
    """
    return DEFAULT_BIOMES


@pytest.fixture
def container(biome_items) -> MemoryContainer:
    """Provide a headless container with one element per biome."""
    return MemoryContainer.from_items(biome_items)


@pytest.fixture
def navigator() -> RecordingNavigator:
    """Provide a navigator that records requested pages."""
    return RecordingNavigator()


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Provide a scheduler whose clock only moves when the test says so.

    Example:
        def test_unlocks(engine, scheduler):
            engine.forward()
            scheduler.advance(0.5)
            assert not engine.state.locked
    """
    return ManualScheduler()


@pytest.fixture
def session_store() -> MemorySessionStore:
    """Provide an empty session store (a fresh browser tab)."""
    return MemorySessionStore()


@pytest.fixture
def engine(biome_items, container, navigator, scheduler) -> TransitionEngine:
    """Provide an engine starting on the first biome."""
    return TransitionEngine(biome_items, container, navigator, scheduler)


@pytest.fixture
def controller(container, session_store, navigator, scheduler) -> CarouselController:
    """Provide a fully wired landing page carousel."""
    result = setup_carousel(container, session_store, navigator, scheduler)
    assert result is not None
    return result
