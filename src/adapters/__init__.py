"""Adapters for external systems.

This module contains implementations of the port protocols: a headless
element tree, session storage, and an event-loop scheduler.
"""

from src.adapters.memory_dom import MemoryContainer, MemoryElement, RecordingNavigator
from src.adapters.memory_session import MemorySessionRegistry, MemorySessionStore
from src.adapters.scheduling import AsyncioScheduler

__all__ = [
    "AsyncioScheduler",
    "MemoryContainer",
    "MemoryElement",
    "MemorySessionRegistry",
    "MemorySessionStore",
    "RecordingNavigator",
]
