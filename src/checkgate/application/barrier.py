"""
Barrier: fires a single completion signal once every checkpoint is done.

Owns the pending checkpoint set, an optional timeout and the progress and
completion observers. Completion by exhaustion and completion by timeout
race; whichever reaches the completion sequence first wins and the barrier
becomes inert.
"""

import logging
import uuid
from collections.abc import Iterable

from checkgate.application.barrier_event_emitter import BarrierEventEmitter
from checkgate.domain.interfaces import (
    BarrierEventStoreInterface,
    ResourceLoaderInterface,
    SchedulerInterface,
    TimerHandleInterface,
)
from checkgate.domain.models import (
    BarrierSnapshot,
    CompletionCallback,
    CompletionReason,
    CompletionResult,
    ProgressCallback,
)

logger = logging.getLogger(__name__)


def _as_names(names: str | Iterable[str]) -> list[str]:
    if isinstance(names, str):
        return [names]
    return list(names)


class Barrier:
    """
    Completion barrier over a dynamic set of named checkpoints.

    Example:
        barrier = Barrier(on_done, timeout=2.0)
        barrier.add_checkpoints(["event1", "event2"])
        barrier.add_assets("http://www.domain.tld/some/image.jpg")
        barrier.start()
        barrier.mark_complete("event1")
        barrier.mark_complete("event2")
        # image.jpg finishes loading -> on_done(CompletionResult(COMPLETED))

    All operations are synchronous and never raise for unknown names,
    duplicate names or calls made after completion; those are no-ops.
    The barrier is not thread-safe: every call, including loader and timer
    callbacks, must arrive on the thread that owns the scheduler.
    """

    def __init__(
        self,
        on_complete: CompletionCallback | None = None,
        timeout: float | None = None,
        *,
        loader: ResourceLoaderInterface | None = None,
        scheduler: SchedulerInterface | None = None,
        event_store: BarrierEventStoreInterface | None = None,
        barrier_id: str | None = None,
    ):
        """
        Args:
            on_complete: Completion observer, called once with the result
            timeout: Seconds after start() at which the barrier gives up
                (None disables the timeout)
            loader: Fetches assets registered via add_assets()
                (creates HttpResourceLoader on first use if None)
            scheduler: Timer facility for the timeout
                (creates AsyncioScheduler on first use if None)
            event_store: Optional sink for the barrier's event trace
            barrier_id: Identifier used in logs and events (random if None)
        """
        self._barrier_id = barrier_id or str(uuid.uuid4())
        self._timeout = timeout
        self._loader = loader
        self._scheduler = scheduler
        self._emitter = (
            BarrierEventEmitter(event_store, self._barrier_id)
            if event_store is not None
            else None
        )

        self._pending: dict[str, None] = {}  # Ordered set
        self._total_count = 0
        self._timer: TimerHandleInterface | None = None
        self._armed = False
        self._finished = False
        self._result: CompletionResult | None = None

        self._progress_observer: ProgressCallback | None = None
        self._completion_observer = on_complete

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def barrier_id(self) -> str:
        return self._barrier_id

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @property
    def pending(self) -> tuple[str, ...]:
        """Names still awaiting completion, in registration order."""
        return tuple(self._pending)

    @property
    def total_count(self) -> int:
        """Distinct names ever registered. Never decreases."""
        return self._total_count

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def result(self) -> CompletionResult | None:
        """The terminal result, or None while the barrier is still open."""
        return self._result

    def snapshot(self) -> BarrierSnapshot:
        return BarrierSnapshot(
            barrier_id=self._barrier_id,
            pending=self.pending,
            total_count=self._total_count,
            armed=self._armed,
            finished=self._finished,
            result=self._result,
        )

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def set_progress_observer(self, callback: ProgressCallback | None) -> None:
        """Replace the progress observer, called as (name, remaining, total)."""
        self._progress_observer = callback

    def set_completion_observer(self, callback: CompletionCallback | None) -> None:
        """Replace the completion observer. No replay after completion."""
        self._completion_observer = callback

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_checkpoints(self, names: str | Iterable[str]) -> "Barrier":
        """
        Register one or more checkpoint names. Duplicates are skipped.

        Args:
            names: A single name or an iterable of names

        Returns:
            Self for fluent chaining
        """
        if self._finished:
            logger.debug(
                "Barrier %s already finished, ignoring checkpoints %r",
                self._barrier_id,
                names,
            )
            return self

        for name in _as_names(names):
            if name in self._pending:
                continue
            self._pending[name] = None
            self._total_count += 1
            logger.debug(
                "Barrier %s: added checkpoint %r (%d registered)",
                self._barrier_id,
                name,
                self._total_count,
            )
            if self._emitter:
                self._emitter.checkpoint_added(name, self._total_count)

        return self

    def add_assets(self, uris: str | Iterable[str]) -> "Barrier":
        """
        Register URIs as checkpoints and preload them through the loader.

        Each URI's checkpoint completes when the loader reports success.
        A failed fetch leaves its checkpoint pending until the timeout.

        Args:
            uris: A single URI or an iterable of URIs

        Returns:
            Self for fluent chaining
        """
        uri_list = [uri for uri in _as_names(uris) if uri]
        if not uri_list or self._finished:
            return self

        loader = self._get_loader()
        for uri in uri_list:
            if uri in self._pending:
                continue
            self.add_checkpoints(uri)
            if self._emitter:
                self._emitter.asset_requested(uri)
            loader.fetch(uri, self._handle_fetch_success, self._handle_fetch_failure)

        return self

    # -------------------------------------------------------------------------
    # Arming
    # -------------------------------------------------------------------------

    def start(self) -> "Barrier":
        """
        Arm the barrier, scheduling the timeout if one is configured.

        Only the first call schedules a timer; later calls are no-ops.

        Returns:
            Self for fluent chaining
        """
        if self._armed or self._finished:
            return self

        self._armed = True
        if self._timeout is not None:
            self._timer = self._get_scheduler().call_later(
                self._timeout, self._handle_timeout
            )
        elif not self._pending:
            logger.debug(
                "Barrier %s armed with no checkpoints and no timeout; "
                "it will never complete",
                self._barrier_id,
            )

        logger.debug(
            "Barrier %s armed (timeout=%s, pending=%d)",
            self._barrier_id,
            self._timeout,
            len(self._pending),
        )
        if self._emitter:
            self._emitter.armed(self._timeout)
        return self

    # -------------------------------------------------------------------------
    # Progress & completion
    # -------------------------------------------------------------------------

    def mark_complete(self, name: str) -> "Barrier":
        """
        Resolve a pending checkpoint.

        Unknown or already-resolved names are ignored.

        Returns:
            Self for fluent chaining
        """
        if name not in self._pending:
            return self

        del self._pending[name]
        remaining = len(self._pending)
        logger.debug(
            "Barrier %s: checkpoint %r complete (%d/%d remaining)",
            self._barrier_id,
            name,
            remaining,
            self._total_count,
        )
        if self._emitter:
            self._emitter.checkpoint_complete(name, remaining, self._total_count)

        try:
            if self._progress_observer is not None:
                self._progress_observer(name, remaining, self._total_count)
        finally:
            if not self._pending:
                self._complete(CompletionReason.COMPLETED)

        return self

    def _handle_timeout(self) -> None:
        self._timer = None
        self._complete(CompletionReason.TIMED_OUT)

    def _complete(self, reason: CompletionReason) -> None:
        """Run the completion sequence. Only the first call has any effect."""
        if self._finished:
            return

        # Terminal state is committed before any observer runs
        self._finished = True
        discarded = len(self._pending)
        self._pending.clear()
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._result = CompletionResult(reason=reason)

        logger.info(
            "Barrier %s finished: %s (%d/%d checkpoints discarded)",
            self._barrier_id,
            reason.value,
            discarded,
            self._total_count,
        )
        if self._emitter:
            self._emitter.finished(reason, discarded, self._total_count)

        if self._completion_observer is not None:
            self._completion_observer(self._result)

    # -------------------------------------------------------------------------
    # Loader callbacks
    # -------------------------------------------------------------------------

    def _handle_fetch_success(self, uri: str, _body: str) -> None:
        self.mark_complete(uri)

    def _handle_fetch_failure(self, uri: str, body: str) -> None:
        if self._finished:
            return
        logger.warning(
            "Barrier %s: asset %r failed to load; it stays pending", self._barrier_id, uri
        )
        if self._emitter:
            self._emitter.asset_failed(uri, body)

    # -------------------------------------------------------------------------
    # Collaborator defaults
    # -------------------------------------------------------------------------

    def _get_loader(self) -> ResourceLoaderInterface:
        # Lazy import keeps adapters out of the application import graph
        if self._loader is None:
            from checkgate.infrastructure.loaders import HttpResourceLoader

            self._loader = HttpResourceLoader()
        return self._loader

    def _get_scheduler(self) -> SchedulerInterface:
        if self._scheduler is None:
            from checkgate.infrastructure.scheduling import AsyncioScheduler

            self._scheduler = AsyncioScheduler()
        return self._scheduler
