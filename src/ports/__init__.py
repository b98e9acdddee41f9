"""Ports (interfaces) for the application.

This module contains Protocol definitions that define the boundaries between
the carousel core and its host: the page elements it decorates, the
navigation primitive, the lock timer, and session storage.
"""

from src.ports.dom import (
    CLASS_ACTIVE,
    CLASS_ANIMATE_ENTER,
    CLASS_NEXT,
    CLASS_NO_TRANSITION,
    CLASS_PREV,
    ROLE_CLASSES,
    CarouselContainer,
    ItemElement,
    Navigator,
    Scheduler,
)
from src.ports.session import SessionStore

__all__ = [
    # Class vocabulary
    "CLASS_ACTIVE",
    "CLASS_ANIMATE_ENTER",
    "CLASS_NEXT",
    "CLASS_NO_TRANSITION",
    "CLASS_PREV",
    "ROLE_CLASSES",
    # Element protocols
    "CarouselContainer",
    "ItemElement",
    "Navigator",
    "Scheduler",
    # Storage
    "SessionStore",
]
