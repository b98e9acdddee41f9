"""Carousel business logic - platform agnostic."""

from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    """Slot an item occupies. Values double as the presentation class names."""

    PREV = "prev"
    ACTIVE = "active"
    NEXT = "next"


class Direction(int, Enum):
    FORWARD = 1
    BACKWARD = -1


@dataclass(frozen=True)
class Item:
    """A carousel destination.

    Attributes:
        id: Stable identifier, also the id of the rendered element.
        label: Text shown on the element.
        target_url: Page the user lands on when the active item is clicked.
    """

    id: str
    label: str
    target_url: str


@dataclass(frozen=True)
class SlotIndices:
    """Indices of the three visible slots."""

    prev: int
    active: int
    next: int

    def role_of(self, index: int) -> Role | None:
        """Return the role held by ``index``, or None when it holds none."""
        if index == self.active:
            return Role.ACTIVE
        if index == self.prev:
            return Role.PREV
        if index == self.next:
            return Role.NEXT
        return None

    def index_of(self, role: Role) -> int:
        if role is Role.PREV:
            return self.prev
        if role is Role.NEXT:
            return self.next
        return self.active


@dataclass
class CarouselState:
    """Mutable state for one carousel instance.

    ``hidden_label`` holds the text blanked from the active item and
    ``hidden_from`` the id of the element it was taken from; None means
    nothing is currently hidden.
    """

    items: tuple[Item, ...]
    active_index: int = 0
    locked: bool = False
    hidden_label: str | None = field(default=None)
    hidden_from: str | None = field(default=None)


class CarouselModel:
    """Owns the ordered items and the active index with cyclic arithmetic."""

    def __init__(self, items: list[Item] | tuple[Item, ...], active_index: int = 0):
        if not items:
            raise ValueError("Carousel requires at least one item")
        self.state = CarouselState(items=tuple(items))
        self.state.active_index = self.wrap(active_index)

    @property
    def items(self) -> tuple[Item, ...]:
        return self.state.items

    @property
    def total_items(self) -> int:
        return len(self.state.items)

    @property
    def active_index(self) -> int:
        return self.state.active_index

    @property
    def active_item(self) -> Item:
        return self.state.items[self.state.active_index]

    def wrap(self, index: int) -> int:
        """Map any integer onto ``[0, N)``, including negative indices."""
        n = self.total_items
        return ((index % n) + n) % n

    def roles_for(self, active_index: int | None = None) -> SlotIndices:
        """Compute the prev/active/next indices around ``active_index``."""
        if active_index is None:
            active_index = self.state.active_index
        active_index = self.wrap(active_index)
        return SlotIndices(
            prev=self.wrap(active_index - 1),
            active=active_index,
            next=self.wrap(active_index + 1),
        )

    def advance(self, direction: Direction | int) -> int:
        """Move the active index one step and return the new index."""
        self.state.active_index = self.wrap(self.state.active_index + int(direction))
        return self.state.active_index

    def index_of(self, item_id: str) -> int | None:
        """Return the position of ``item_id``, or None if absent."""
        for index, item in enumerate(self.state.items):
            if item.id == item_id:
                return index
        return None
