"""Tests for input adapters."""

import pytest

from src.core.carousel_logic import Role
from src.core.input_adapters import (
    CLICK_DISPATCH,
    ClickAdapter,
    KeyboardAdapter,
    Signal,
    TouchAdapter,
    WheelAdapter,
)


@pytest.fixture
def signals() -> list[Signal]:
    return []


class TestWheelAdapter:
    """Tests for wheel direction mapping."""

    def test_scroll_down_forward(self, signals) -> None:
        adapter = WheelAdapter(signals.append)
        assert adapter.handle(delta_y=10) is Signal.FORWARD
        assert signals == [Signal.FORWARD]

    def test_scroll_up_backward(self, signals) -> None:
        adapter = WheelAdapter(signals.append)
        assert adapter.handle(delta_y=-10) is Signal.BACKWARD
        assert signals == [Signal.BACKWARD]

    @pytest.mark.parametrize(
        "delta_x,delta_y,expected",
        [
            (-5, 0, Signal.FORWARD),
            (5, 0, Signal.BACKWARD),
            (5, 5, Signal.FORWARD),
            (-5, -5, Signal.FORWARD),
            (0, 0, None),
        ],
    )
    def test_interpret(self, delta_x, delta_y, expected) -> None:
        assert WheelAdapter.interpret(delta_x, delta_y) is expected

    def test_zero_delta_emits_nothing(self, signals) -> None:
        adapter = WheelAdapter(signals.append)
        assert adapter.handle(0, 0) is None
        assert signals == []


class TestKeyboardAdapter:
    """Tests for arrow key mapping."""

    @pytest.mark.parametrize("key", ["ArrowRight", "ArrowDown"])
    def test_forward_keys(self, key, signals) -> None:
        KeyboardAdapter(signals.append).handle(key)
        assert signals == [Signal.FORWARD]

    @pytest.mark.parametrize("key", ["ArrowLeft", "ArrowUp"])
    def test_backward_keys(self, key, signals) -> None:
        KeyboardAdapter(signals.append).handle(key)
        assert signals == [Signal.BACKWARD]

    @pytest.mark.parametrize("key", ["Enter", "a", "arrowright", " "])
    def test_other_keys_ignored(self, key, signals) -> None:
        assert KeyboardAdapter(signals.append).handle(key) is None
        assert signals == []


class TestTouchAdapter:
    """Tests for swipe detection."""

    def test_left_swipe_forward(self, signals) -> None:
        """Start (100,100), release at (40,105): 60px left, 5px down."""
        adapter = TouchAdapter(signals.append)
        adapter.start(100, 100)
        assert adapter.end(40, 105) is Signal.FORWARD
        assert signals == [Signal.FORWARD]

    def test_right_swipe_backward(self, signals) -> None:
        adapter = TouchAdapter(signals.append)
        adapter.start(100, 100)
        adapter.move(130, 100)
        adapter.move(170, 102)
        assert adapter.end() is Signal.BACKWARD
        assert signals == [Signal.BACKWARD]

    def test_exact_threshold_counts(self, signals) -> None:
        adapter = TouchAdapter(signals.append)
        adapter.start(100, 100)
        assert adapter.end(50, 100) is Signal.FORWARD

    def test_short_swipe_ignored(self, signals) -> None:
        adapter = TouchAdapter(signals.append)
        adapter.start(100, 100)
        assert adapter.end(60, 100) is None
        assert signals == []

    def test_vertical_swipe_ignored(self, signals) -> None:
        """Mostly vertical gestures (scrolling the page) are not swipes."""
        adapter = TouchAdapter(signals.append)
        adapter.start(100, 100)
        assert adapter.end(20, 160) is None
        assert signals == []

    def test_tap_ignored(self, signals) -> None:
        adapter = TouchAdapter(signals.append)
        adapter.start(100, 100)
        assert adapter.end() is None

    def test_release_without_start_ignored(self, signals) -> None:
        adapter = TouchAdapter(signals.append)
        adapter.move(10, 10)
        assert adapter.end(300, 10) is None
        assert signals == []

    def test_state_reset_after_release(self, signals) -> None:
        adapter = TouchAdapter(signals.append)
        adapter.start(100, 100)
        adapter.end(20, 100)
        assert adapter.is_dragging is False
        assert adapter.end(0, 0) is None
        assert signals == [Signal.FORWARD]

    def test_custom_threshold(self, signals) -> None:
        adapter = TouchAdapter(signals.append, threshold=100)
        adapter.start(100, 100)
        assert adapter.end(40, 100) is None
        adapter.start(200, 100)
        assert adapter.end(90, 100) is Signal.FORWARD


class TestClickAdapter:
    """Tests for role-based click dispatch."""

    ROLES = {"tundra": Role.PREV, "forest": Role.ACTIVE, "mesa": Role.NEXT}

    def test_dispatch_table(self) -> None:
        assert CLICK_DISPATCH == {
            Role.PREV: Signal.BACKWARD,
            Role.NEXT: Signal.FORWARD,
            Role.ACTIVE: Signal.NAVIGATE,
        }

    @pytest.mark.parametrize(
        "element_id,expected",
        [
            ("tundra", Signal.BACKWARD),
            ("forest", Signal.NAVIGATE),
            ("mesa", Signal.FORWARD),
        ],
    )
    def test_click_by_role(self, element_id, expected, signals) -> None:
        adapter = ClickAdapter(self.ROLES.get, signals.append)
        assert adapter.handle(element_id) is expected
        assert signals == [expected]

    def test_click_without_role_ignored(self, signals) -> None:
        adapter = ClickAdapter(self.ROLES.get, signals.append)
        assert adapter.handle("caldera") is None
        assert signals == []

    def test_role_looked_up_per_click(self, signals) -> None:
        """The same element means something different once roles move."""
        roles = dict(self.ROLES)
        adapter = ClickAdapter(roles.get, signals.append)
        adapter.handle("mesa")
        roles["mesa"] = Role.ACTIVE
        adapter.handle("mesa")
        assert signals == [Signal.FORWARD, Signal.NAVIGATE]
