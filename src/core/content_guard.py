"""Blanks the active item's label and gives it back when the item leaves.

An empty label (rather than transparent text) keeps users from selecting or
glimpsing the hidden text, especially on touch devices.
"""

from src.core.carousel_logic import CarouselState
from src.core.errors import ContentGuardError
from src.core.logging import get_logger
from src.ports.dom import ItemElement

logger = get_logger(__name__)


class ContentVisibilityGuard:
    """Single-slot buffer for the label removed from the active item.

    The buffer lives on the shared ``CarouselState`` so the engine's state
    stays in one place. Only one label can be held at a time: it must be
    restored to the same element before another element is hidden.
    """

    def __init__(self, state: CarouselState) -> None:
        self._state = state

    @property
    def hidden_label(self) -> str | None:
        return self._state.hidden_label

    @property
    def hidden_from(self) -> str | None:
        """Id of the element whose label is currently held."""
        return self._state.hidden_from

    def hide(self, element: ItemElement) -> None:
        """Capture the element's displayed text and blank it.

        Raises:
            ContentGuardError: If another element's label is still held.
        """
        held = self._state.hidden_from
        if held is not None:
            raise ContentGuardError(
                f"Cannot hide {element.id!r}: label of {held!r} has not been restored"
            )
        self._state.hidden_label = element.text
        self._state.hidden_from = element.id
        element.text = ""
        logger.debug("label_hidden", element_id=element.id)

    def restore(self, element: ItemElement) -> None:
        """Give the held label back to the element it was taken from.

        Raises:
            ContentGuardError: If nothing is held, or it belongs elsewhere.
        """
        held = self._state.hidden_from
        if held is None or self._state.hidden_label is None:
            raise ContentGuardError(f"No hidden label to restore to {element.id!r}")
        if held != element.id:
            raise ContentGuardError(
                f"Hidden label belongs to {held!r}, not {element.id!r}"
            )
        element.text = self._state.hidden_label
        self._state.hidden_label = None
        self._state.hidden_from = None
        logger.debug("label_restored", element_id=element.id)
