"""Protocols for the page elements the carousel drives.

The engine never renders anything. It toggles class names and displayed text
on item elements, flips pointer interaction on their container, and asks a
navigator to leave the page. Any host able to do those things (a headless
element tree, a browser bridge) can run the carousel.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

# Class vocabulary consumed by the presentation layer
CLASS_ACTIVE = "active"
CLASS_PREV = "prev"
CLASS_NEXT = "next"
CLASS_ANIMATE_ENTER = "animate-enter"
CLASS_NO_TRANSITION = "no-transition"

ROLE_CLASSES = (CLASS_PREV, CLASS_ACTIVE, CLASS_NEXT)


class ItemElement(Protocol):
    """A rendered carousel item."""

    @property
    def id(self) -> str:
        ...

    @property
    def text(self) -> str:
        """Displayed text content."""
        ...

    @text.setter
    def text(self, value: str) -> None:
        ...

    def add_class(self, *names: str) -> None:
        ...

    def remove_class(self, *names: str) -> None:
        ...

    def has_class(self, name: str) -> bool:
        ...


class CarouselContainer(Protocol):
    """The element grouping all item elements, in display order."""

    pointer_events: bool

    @property
    def children(self) -> Sequence[ItemElement]:
        ...


class Navigator(Protocol):
    """Changes the current document location."""

    def navigate(self, url: str) -> None:
        ...


class Scheduler(Protocol):
    """Runs a callback once after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        ...
