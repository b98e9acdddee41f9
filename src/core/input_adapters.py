"""Input adapters that turn raw user input into navigation signals.

Each adapter understands one input channel (click, wheel, keyboard, touch)
and reports what the user asked for as a ``Signal``. Adapters hand signals to
a sink, normally ``TransitionEngine.dispatch``; they never touch carousel
state themselves.
"""

from collections.abc import Callable
from enum import Enum

from src.core.carousel_logic import Role
from src.core.config import SWIPE_THRESHOLD
from src.core.logging import get_logger

logger = get_logger(__name__)


class Signal(str, Enum):
    """Normalized user intent."""

    FORWARD = "forward"
    BACKWARD = "backward"
    NAVIGATE = "navigate"


SignalSink = Callable[[Signal], object]

# Role held by the clicked item -> what the click means, looked up per click
CLICK_DISPATCH: dict[Role, Signal] = {
    Role.PREV: Signal.BACKWARD,
    Role.NEXT: Signal.FORWARD,
    Role.ACTIVE: Signal.NAVIGATE,
}

FORWARD_KEYS = frozenset({"ArrowRight", "ArrowDown"})
BACKWARD_KEYS = frozenset({"ArrowLeft", "ArrowUp"})


class ClickAdapter:
    """Maps a click on an item to a signal based on the item's current role."""

    def __init__(self, role_of: Callable[[str], Role | None], sink: SignalSink) -> None:
        self._role_of = role_of
        self._sink = sink

    def interpret(self, element_id: str) -> Signal | None:
        role = self._role_of(element_id)
        if role is None:
            return None
        return CLICK_DISPATCH[role]

    def handle(self, element_id: str) -> Signal | None:
        signal = self.interpret(element_id)
        if signal is not None:
            self._sink(signal)
        return signal


class WheelAdapter:
    """Scroll down or left moves forward; scroll up or right moves backward."""

    def __init__(self, sink: SignalSink) -> None:
        self._sink = sink

    @staticmethod
    def interpret(delta_x: float, delta_y: float) -> Signal | None:
        if delta_y > 0 or delta_x < 0:
            return Signal.FORWARD
        if delta_y < 0 or delta_x > 0:
            return Signal.BACKWARD
        return None

    def handle(self, delta_x: float = 0.0, delta_y: float = 0.0) -> Signal | None:
        signal = self.interpret(delta_x, delta_y)
        if signal is not None:
            self._sink(signal)
        return signal


class KeyboardAdapter:
    """Arrow keys: right/down forward, left/up backward."""

    def __init__(self, sink: SignalSink) -> None:
        self._sink = sink

    @staticmethod
    def interpret(key: str) -> Signal | None:
        if key in FORWARD_KEYS:
            return Signal.FORWARD
        if key in BACKWARD_KEYS:
            return Signal.BACKWARD
        return None

    def handle(self, key: str) -> Signal | None:
        signal = self.interpret(key)
        if signal is not None:
            self._sink(signal)
        return signal


class TouchAdapter:
    """Single-finger horizontal swipe detection.

    Tracks the touch from start to release. On release a swipe counts only
    when it travelled at least ``threshold`` pixels horizontally and less
    than ``threshold`` vertically; a leftward swipe moves forward.
    """

    def __init__(self, sink: SignalSink, threshold: int = SWIPE_THRESHOLD) -> None:
        self._sink = sink
        self.threshold = threshold
        self._reset()

    def _reset(self) -> None:
        self.start_x = self.current_x = 0.0
        self.start_y = self.current_y = 0.0
        self.is_dragging = False

    def start(self, x: float, y: float) -> None:
        self.start_x = self.current_x = x
        self.start_y = self.current_y = y
        self.is_dragging = True

    def move(self, x: float, y: float) -> None:
        if not self.is_dragging:
            return
        self.current_x = x
        self.current_y = y

    def interpret(self, diff_x: float, diff_y: float) -> Signal | None:
        if abs(diff_x) >= self.threshold and abs(diff_y) < self.threshold:
            return Signal.FORWARD if diff_x < 0 else Signal.BACKWARD
        return None

    def end(self, x: float | None = None, y: float | None = None) -> Signal | None:
        """Finish the gesture, optionally at final coordinates.

        A release without a preceding ``start`` is ignored.
        """
        if not self.is_dragging:
            return None
        if x is not None:
            self.current_x = x
        if y is not None:
            self.current_y = y

        diff_x = self.current_x - self.start_x
        diff_y = self.current_y - self.start_y
        self._reset()

        signal = self.interpret(diff_x, diff_y)
        if signal is None:
            logger.debug("swipe_ignored", diff_x=diff_x, diff_y=diff_y)
            return None
        self._sink(signal)
        return signal
