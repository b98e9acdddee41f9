"""Headless element tree implementing the DOM protocols.

Used by the HTTP layer to host one landing page per session, and by tests.
Class lists keep insertion order and ignore duplicates, like a browser's
``classList``.
"""

from collections.abc import Iterable

from src.core.carousel_logic import Item


class MemoryElement:
    """An item element with an id, displayed text, and a class list."""

    def __init__(self, element_id: str, text: str = "", classes: Iterable[str] = ()) -> None:
        self._id = element_id
        self.text = text
        self._classes: list[str] = []
        self.add_class(*classes)

    def __repr__(self) -> str:
        return f"MemoryElement(id={self._id!r}, text={self.text!r}, classes={self._classes!r})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def classes(self) -> list[str]:
        return list(self._classes)

    def add_class(self, *names: str) -> None:
        for name in names:
            if name not in self._classes:
                self._classes.append(name)

    def remove_class(self, *names: str) -> None:
        self._classes = [name for name in self._classes if name not in names]

    def has_class(self, name: str) -> bool:
        return name in self._classes


class MemoryContainer:
    """Carousel container holding item elements in display order."""

    def __init__(self, children: Iterable[MemoryElement]) -> None:
        self._children = list(children)
        self.pointer_events = True

    @property
    def children(self) -> list[MemoryElement]:
        return list(self._children)

    def get(self, element_id: str) -> MemoryElement | None:
        for child in self._children:
            if child.id == element_id:
                return child
        return None

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "MemoryContainer":
        """Render one element per item, showing the item's label."""
        return cls(MemoryElement(item.id, item.label) for item in items)


class RecordingNavigator:
    """Navigator that records requested locations instead of leaving the page."""

    def __init__(self) -> None:
        self.history: list[str] = []

    @property
    def location(self) -> str | None:
        return self.history[-1] if self.history else None

    def navigate(self, url: str) -> None:
        self.history.append(url)
