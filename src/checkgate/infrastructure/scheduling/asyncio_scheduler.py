"""
Asyncio-backed scheduler.

Runs barrier timeouts on an asyncio event loop.
"""

import asyncio
from collections.abc import Callable

from checkgate.domain.interfaces import SchedulerInterface, TimerHandleInterface


class AsyncioTimerHandle(TimerHandleInterface):
    """Wraps an asyncio.TimerHandle."""

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()

    @property
    def when(self) -> float:
        """Loop time at which the callback is due."""
        return self._handle.when()


class AsyncioScheduler(SchedulerInterface):
    """Schedules callbacks with loop.call_later()."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """
        Args:
            loop: Event loop to schedule on (uses the running loop if None)

        A loop is only looked up when the first callback is scheduled, so
        the scheduler may be created outside of a coroutine.
        """
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            # Raises RuntimeError when called outside a running loop
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> AsyncioTimerHandle:
        return AsyncioTimerHandle(self._get_loop().call_later(delay, callback))
