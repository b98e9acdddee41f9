"""Scheduler backed by the running asyncio event loop."""

import asyncio
from collections.abc import Callable


class AsyncioScheduler:
    """Runs lock-window callbacks on the event loop serving the request.

    Callbacks run on the same loop as the request handlers, so they never
    interleave with a transition in progress.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_later(delay, callback)
