"""Tests for landing page carousel setup and input wiring."""

from src.adapters import MemoryContainer, MemorySessionStore, RecordingNavigator
from src.core.config import CarouselConfig
from src.core.controller import items_from_container, setup_carousel
from src.core.input_adapters import Signal
from tests.mocks.scheduling import ManualScheduler


class TestSetupCarousel:
    """Tests for setup_carousel."""

    def test_missing_container_is_noop(self, session_store, navigator, scheduler) -> None:
        """A page without a carousel simply gets no controller."""
        assert setup_carousel(None, session_store, navigator, scheduler) is None
        assert scheduler.pending == 0

    def test_items_derived_from_elements(self, container) -> None:
        items = items_from_container(container)
        assert [item.id for item in items] == [
            "forest",
            "mesa",
            "caldera",
            "marine",
            "tundra",
        ]
        assert items[0].label == "Forest"
        assert items[0].target_url == "pages/forest.html"

    def test_page_url_template(self, container) -> None:
        config = CarouselConfig(page_url_template="/biomes/{id}")
        assert items_from_container(container, config)[2].target_url == "/biomes/caldera"

    def test_starts_on_first_without_history(self, controller) -> None:
        assert controller.engine.model.active_item.id == "forest"

    def test_starts_on_persisted_item(self, biome_items, navigator, scheduler) -> None:
        store = MemorySessionStore({"activeBiome": "marine"})
        container = MemoryContainer.from_items(biome_items)
        controller = setup_carousel(container, store, navigator, scheduler)
        assert controller.engine.model.active_item.id == "marine"
        assert container.get("marine").has_class("active")
        assert container.get("marine").text == ""

    def test_unknown_persisted_item_starts_on_first(self, biome_items, navigator, scheduler) -> None:
        store = MemorySessionStore({"activeBiome": "desert"})
        container = MemoryContainer.from_items(biome_items)
        controller = setup_carousel(container, store, navigator, scheduler)
        assert controller.engine.active_index == 0

    def test_config_applied(self, container, session_store, navigator) -> None:
        scheduler = ManualScheduler()
        config = CarouselConfig(lock_duration_ms=1200, swipe_threshold_px=80)
        controller = setup_carousel(container, session_store, navigator, scheduler, config)
        assert controller.engine.lock_duration == 1.2
        assert controller.touch.threshold == 80


class TestControllerInput:
    """Every channel drives the same engine."""

    def test_wheel(self, controller) -> None:
        assert controller.on_wheel(delta_y=10) is Signal.FORWARD
        assert controller.engine.active_index == 1

    def test_wheel_backward(self, controller) -> None:
        controller.on_wheel(delta_y=-10)
        assert controller.engine.model.active_item.id == "tundra"

    def test_keyboard(self, controller) -> None:
        controller.on_key("ArrowLeft")
        assert controller.engine.model.active_item.id == "tundra"

    def test_touch(self, controller) -> None:
        controller.on_touch_start(100, 100)
        controller.on_touch_move(70, 102)
        assert controller.on_touch_end(40, 105) is Signal.FORWARD
        assert controller.engine.model.active_item.id == "mesa"

    def test_click_next_then_active(self, controller, navigator, scheduler) -> None:
        controller.on_click("mesa")
        scheduler.advance(0.5)
        assert controller.on_click("mesa") is Signal.NAVIGATE
        assert navigator.location == "pages/mesa.html"

    def test_click_prev(self, controller) -> None:
        assert controller.on_click("tundra") is Signal.BACKWARD
        assert controller.engine.model.active_item.id == "tundra"

    def test_click_ignored_while_locked(self, controller, navigator) -> None:
        """Pointer interaction is off during the settle window."""
        controller.on_wheel(delta_y=10)
        assert controller.on_click("mesa") is None
        assert navigator.history == []

    def test_keyboard_and_wheel_blocked_while_locked(self, controller, scheduler) -> None:
        """Non-pointer channels cannot slip a transition into the window."""
        controller.on_key("ArrowRight")
        controller.on_wheel(delta_y=10)
        controller.on_key("ArrowDown")
        controller.on_touch_start(100, 100)
        controller.on_touch_end(20, 100)
        assert controller.engine.active_index == 1
        assert controller.engine.transitions == 1

        scheduler.advance(0.5)
        controller.on_key("ArrowRight")
        assert controller.engine.active_index == 2


def test_recording_navigator_location() -> None:
    navigator = RecordingNavigator()
    assert navigator.location is None
    navigator.navigate("pages/forest.html")
    assert navigator.location == "pages/forest.html"
