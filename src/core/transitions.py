"""Transition state machine for the circular carousel.

The engine owns all mutable carousel state. Each transition runs to
completion synchronously: the outgoing edge item loses its role, the active
item steps aside and gets its label back, the incoming item becomes active
and has its label blanked, and a fresh item enters on the far edge.

After every transition the carousel is locked for a short settle window. The
lock is a single re-entrancy flag checked at the top of every entry point, so
wheel and keyboard input are rejected during the window just like clicks.
"""

from collections.abc import Iterable, Sequence
from enum import Enum
from functools import partial

from src.core.carousel_logic import (
    CarouselModel,
    CarouselState,
    Direction,
    Item,
    Role,
    SlotIndices,
)
from src.core.config import UI_LOCKED_DURATION
from src.core.content_guard import ContentVisibilityGuard
from src.core.errors import (
    DuplicateItemError,
    InvalidInputError,
    ItemNotFoundError,
    UnsupportedItemCountError,
)
from src.core.input_adapters import Signal
from src.core.logging import get_logger
from src.ports.dom import (
    CLASS_ACTIVE,
    CLASS_ANIMATE_ENTER,
    CLASS_NO_TRANSITION,
    ROLE_CLASSES,
    CarouselContainer,
    ItemElement,
    Navigator,
    Scheduler,
)

logger = get_logger(__name__)

MIN_ITEMS = 3


def _check_unique(ids: Iterable[str], source: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise DuplicateItemError(item_id, source)
        seen.add(item_id)


class EngineState(str, Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"


class TransitionEngine:
    """Moves the carousel between items and keeps role classes in sync.

    Args:
        items: Ordered carousel items.
        container: Element holding one child element per item (matched by id).
        navigator: Used when the active item is clicked.
        scheduler: Runs the end of the lock window.
        initial_index: Index of the item shown first.
        lock_duration: Seconds the carousel stays locked after a transition.

    Raises:
        UnsupportedItemCountError: If fewer than three items are given.
        DuplicateItemError: If item ids or element ids repeat.
        ItemNotFoundError: If an item has no matching element.
    """

    def __init__(
        self,
        items: Sequence[Item],
        container: CarouselContainer,
        navigator: Navigator,
        scheduler: Scheduler,
        initial_index: int = 0,
        lock_duration: float = UI_LOCKED_DURATION / 1000,
    ) -> None:
        if len(items) < MIN_ITEMS:
            raise UnsupportedItemCountError(len(items), MIN_ITEMS)

        self.model = CarouselModel(items, initial_index)
        self.guard = ContentVisibilityGuard(self.model.state)
        self.container = container
        self.lock_duration = lock_duration
        self.transitions = 0
        self._navigator = navigator
        self._scheduler = scheduler
        self._elements = self._match_elements(self.model.items, container)

        self._apply_initial_roles()

    @staticmethod
    def _match_elements(
        items: Sequence[Item], container: CarouselContainer
    ) -> list[ItemElement]:
        _check_unique((item.id for item in items), "items")
        _check_unique((element.id for element in container.children), "container")

        by_id = {element.id: element for element in container.children}
        elements = []
        for item in items:
            element = by_id.get(item.id)
            if element is None:
                raise ItemNotFoundError(item.id)
            elements.append(element)
        return elements

    def _apply_initial_roles(self) -> None:
        for element in self._elements:
            element.remove_class(*ROLE_CLASSES, CLASS_ANIMATE_ENTER, CLASS_NO_TRANSITION)

        slots = self.model.roles_for()
        for role in Role:
            self._elements[slots.index_of(role)].add_class(role.value)
        self.guard.hide(self._elements[slots.active])

        logger.info(
            "carousel_initialized",
            total_items=self.model.total_items,
            active_item=self.model.active_item.id,
        )

    # -- read-only views -------------------------------------------------

    @property
    def state(self) -> CarouselState:
        return self.model.state

    @property
    def engine_state(self) -> EngineState:
        if self.model.state.locked:
            return EngineState.TRANSITIONING
        return EngineState.IDLE

    @property
    def active_index(self) -> int:
        return self.model.active_index

    @property
    def slots(self) -> SlotIndices:
        return self.model.roles_for()

    @property
    def elements(self) -> tuple[ItemElement, ...]:
        return tuple(self._elements)

    def role_of(self, element_id: str) -> Role | None:
        """Current role of the element with ``element_id``, if any."""
        index = self.model.index_of(element_id)
        if index is None:
            return None
        return self.slots.role_of(index)

    # -- entry points ----------------------------------------------------

    def dispatch(self, signal: Signal) -> bool:
        """Act on a signal from an input adapter.

        Returns:
            True if the signal caused a transition or navigation.

        Raises:
            InvalidInputError: If ``signal`` is not a ``Signal``.
        """
        if signal is Signal.FORWARD:
            return self.forward()
        if signal is Signal.BACKWARD:
            return self.backward()
        if signal is Signal.NAVIGATE:
            return self.navigate()
        raise InvalidInputError(f"Unknown signal: {signal!r}")

    def forward(self) -> bool:
        return self._transition(Direction.FORWARD)

    def backward(self) -> bool:
        return self._transition(Direction.BACKWARD)

    def navigate(self) -> bool:
        """Open the active item's destination page."""
        if self.model.state.locked:
            logger.debug("navigation_rejected", reason="locked")
            return False
        item = self.model.active_item
        logger.info("navigation_requested", item_id=item.id, url=item.target_url)
        self._navigator.navigate(item.target_url)
        return True

    # -- transition steps ------------------------------------------------

    def _transition(self, direction: Direction) -> bool:
        state = self.model.state
        if state.locked:
            logger.debug(
                "transition_rejected",
                direction=direction.name.lower(),
                active_index=state.active_index,
            )
            return False
        state.locked = True

        # Forward: the prev edge drops out and the next item moves in.
        if direction is Direction.FORWARD:
            trailing, leading = Role.PREV, Role.NEXT
        else:
            trailing, leading = Role.NEXT, Role.PREV

        slots = self.model.roles_for()
        previous_index = slots.active

        outgoing = self._elements[slots.index_of(trailing)]
        outgoing.remove_class(trailing.value, CLASS_ANIMATE_ENTER)

        leaving = self._elements[slots.active]
        leaving.remove_class(CLASS_ACTIVE)
        leaving.add_class(trailing.value)
        self.guard.restore(leaving)

        new_index = self.model.advance(direction)

        incoming = self._elements[new_index]
        incoming.remove_class(leading.value, CLASS_ANIMATE_ENTER)
        incoming.add_class(CLASS_ACTIVE)
        self.guard.hide(incoming)

        self._lock(incoming)

        entering = self._elements[self.model.wrap(new_index + direction)]
        entering.add_class(leading.value, CLASS_ANIMATE_ENTER)

        self.transitions += 1
        logger.info(
            "transition_completed",
            direction=direction.name.lower(),
            from_index=previous_index,
            active_index=new_index,
            active_item=self.model.active_item.id,
        )
        return True

    def _lock(self, incoming: ItemElement) -> None:
        self.container.pointer_events = False
        incoming.add_class(CLASS_NO_TRANSITION)
        self._scheduler.call_later(self.lock_duration, partial(self._unlock, incoming))

    def _unlock(self, incoming: ItemElement) -> None:
        self.container.pointer_events = True
        incoming.remove_class(CLASS_NO_TRANSITION)
        self.model.state.locked = False
        logger.debug("carousel_unlocked", active_index=self.model.active_index)
