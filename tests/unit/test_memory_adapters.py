"""Tests for the in-memory element tree, session storage and scheduler."""

import asyncio

import pytest

from src.adapters import (
    AsyncioScheduler,
    MemoryContainer,
    MemoryElement,
    MemorySessionRegistry,
    MemorySessionStore,
)
from src.core.biomes import DEFAULT_BIOMES


class TestMemoryElement:
    def test_class_list_keeps_order_and_ignores_duplicates(self) -> None:
        element = MemoryElement("forest", "Forest")
        element.add_class("next", "animate-enter")
        element.add_class("next")
        assert element.classes == ["next", "animate-enter"]

    def test_remove_missing_class_is_harmless(self) -> None:
        element = MemoryElement("forest", classes=["prev"])
        element.remove_class("active", "prev")
        assert element.classes == []
        assert not element.has_class("prev")

    def test_text_is_writable(self) -> None:
        element = MemoryElement("forest", "Forest")
        element.text = ""
        assert element.text == ""


class TestMemoryContainer:
    def test_from_items(self) -> None:
        container = MemoryContainer.from_items(DEFAULT_BIOMES)
        assert [child.id for child in container.children] == [
            "forest",
            "mesa",
            "caldera",
            "marine",
            "tundra",
        ]
        assert container.get("marine").text == "Marine"
        assert container.pointer_events is True

    def test_get_unknown(self) -> None:
        assert MemoryContainer([]).get("forest") is None


class TestMemorySessionStore:
    def test_get_set_remove(self) -> None:
        store = MemorySessionStore()
        assert store.get_item("activeBiome") is None
        store.set_item("activeBiome", "mesa")
        assert store.get_item("activeBiome") == "mesa"
        store.remove_item("activeBiome")
        assert store.get_item("activeBiome") is None
        store.remove_item("activeBiome")

    def test_values_stored_as_strings(self) -> None:
        store = MemorySessionStore()
        store.set_item("visited", True)  # type: ignore[arg-type]
        assert store.get_item("visited") == "True"

    def test_clear(self) -> None:
        store = MemorySessionStore({"a": "1", "b": "2"})
        store.clear()
        assert len(store) == 0


class TestMemorySessionRegistry:
    def test_one_store_per_session(self) -> None:
        registry = MemorySessionRegistry()
        tab_one = registry.get_or_create("tab-1")
        tab_one.set_item("activeBiome", "tundra")

        assert registry.get_or_create("tab-1") is tab_one
        assert registry.get_or_create("tab-2").get_item("activeBiome") is None
        assert "tab-1" in registry

    def test_drop_and_clear(self) -> None:
        registry = MemorySessionRegistry()
        registry.get_or_create("tab-1")
        registry.get_or_create("tab-2")
        registry.drop("tab-1")
        assert registry.get("tab-1") is None
        registry.clear()
        assert "tab-2" not in registry


class TestAsyncioScheduler:
    @pytest.mark.asyncio
    async def test_runs_callback_after_delay(self) -> None:
        scheduler = AsyncioScheduler()
        fired = asyncio.Event()
        scheduler.call_later(0.01, fired.set)
        assert not fired.is_set()
        await asyncio.wait_for(fired.wait(), timeout=1.0)

    @pytest.mark.asyncio
    async def test_uses_given_loop(self) -> None:
        loop = asyncio.get_running_loop()
        scheduler = AsyncioScheduler(loop)
        calls: list[str] = []
        scheduler.call_later(0, lambda: calls.append("done"))
        await asyncio.sleep(0.01)
        assert calls == ["done"]
