"""
Manual scheduler for testing without an event loop.

Keeps a virtual clock that only moves when advance() is called.
"""

import heapq
import itertools
from collections.abc import Callable

from checkgate.domain.interfaces import SchedulerInterface, TimerHandleInterface


class ManualTimerHandle(TimerHandleInterface):
    """Handle for a callback queued on a ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self._callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _run(self) -> None:
        self._callback()


class ManualScheduler(SchedulerInterface):
    """Deterministic virtual-time scheduler for tests."""

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue: list[tuple[float, int, ManualTimerHandle]] = []
        self._sequence = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    @property
    def pending_count(self) -> int:
        """Number of queued callbacks that have not been cancelled."""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> ManualTimerHandle:
        handle = ManualTimerHandle(self._now + max(delay, 0.0), callback)
        # Sequence number keeps equal due times in scheduling order
        heapq.heappush(self._queue, (handle.when, next(self._sequence), handle))
        return handle

    def advance(self, seconds: float = 0.0) -> int:
        """
        Move the clock forward, running every callback that falls due.

        Callbacks scheduled while advancing run too if they are due
        before the new time.

        Args:
            seconds: How far to move the clock

        Returns:
            Number of callbacks that ran
        """
        deadline = self._now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= deadline:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = when
            handle._run()
            ran += 1
        self._now = deadline
        return ran

    def run_all(self) -> int:
        """Advance until no callbacks remain queued."""
        ran = 0
        while self._queue:
            ran += self.advance(max(self._queue[0][0] - self._now, 0.0))
        return ran
