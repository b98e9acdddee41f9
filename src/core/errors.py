"""Error classification for the carousel engine.

Carousel failures fall into a small set of categories. The HTTP layer uses
the category to pick a status code; the engine itself only raises for
configuration mistakes and state corruption, never for ordinary user input.

Example:
    from src.core.errors import CarouselError, ErrorCategory, classify_error

    try:
        engine = TransitionEngine(items, container, navigator, scheduler)
    except CarouselError as ex:
        if ex.category is ErrorCategory.CONFIGURATION:
            ...
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of error types for handling decisions."""

    INVALID_INPUT = auto()  # Malformed input event
    CONFIGURATION = auto()  # Carousel built from an unusable item set
    NOT_FOUND = auto()  # Unknown item, element, or session
    STATE_CORRUPTION = auto()  # Internal bookkeeping would be broken
    UNKNOWN = auto()  # Unclassified error


class CarouselError(Exception):
    """Base class for carousel errors.

    Attributes:
        category: The category used for handling decisions.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(self, message: str, category: ErrorCategory | None = None) -> None:
        super().__init__(message)
        if category is not None:
            self.category = category


class UnsupportedItemCountError(CarouselError):
    """Raised when a carousel is built with fewer than three items.

    With one or two items the prev, active and next slots alias each other,
    so role classes would collide on the same element.
    """

    category = ErrorCategory.CONFIGURATION

    def __init__(self, count: int, minimum: int) -> None:
        super().__init__(
            f"Carousel needs at least {minimum} items, got {count}"
        )
        self.count = count
        self.minimum = minimum


class DuplicateItemError(CarouselError):
    """Raised when two items or two rendered elements share an id.

    Roles are applied by id, so a repeated id would put two roles on one
    element and leave another element without any.
    """

    category = ErrorCategory.CONFIGURATION

    def __init__(self, item_id: str, source: str = "items") -> None:
        super().__init__(f"Duplicate id in {source}: {item_id}")
        self.item_id = item_id
        self.source = source


class ItemNotFoundError(CarouselError):
    """Raised when an item id does not match any carousel item."""

    category = ErrorCategory.NOT_FOUND

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item not found: {item_id}")
        self.item_id = item_id


class ContentGuardError(CarouselError):
    """Raised when the single-slot label buffer would be misused."""

    category = ErrorCategory.STATE_CORRUPTION


class InvalidInputError(CarouselError):
    """Raised when an input event cannot be interpreted."""

    category = ErrorCategory.INVALID_INPUT


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into an error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error.
    """
    if isinstance(error, CarouselError):
        return error.category

    if isinstance(error, KeyError):
        return ErrorCategory.NOT_FOUND
    if isinstance(error, (ValueError, TypeError)):
        return ErrorCategory.INVALID_INPUT

    error_str = str(error).lower()
    if "not found" in error_str:
        return ErrorCategory.NOT_FOUND
    if "invalid" in error_str:
        return ErrorCategory.INVALID_INPUT
    if "configuration" in error_str or "not configured" in error_str:
        return ErrorCategory.CONFIGURATION

    return ErrorCategory.UNKNOWN
