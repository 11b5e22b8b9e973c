"""Barrier event emission service."""

import uuid
from datetime import datetime, timezone

from checkgate.domain.barrier_event import BarrierEvent, BarrierEventType
from checkgate.domain.interfaces import BarrierEventStoreInterface
from checkgate.domain.models import CompletionReason


class BarrierEventEmitter:
    """Emits barrier events to a store.

    Provides convenience methods for recording the transitions of a
    single barrier, handling ID generation and timestamps.
    """

    def __init__(self, event_store: BarrierEventStoreInterface, barrier_id: str) -> None:
        self._store = event_store
        self._barrier_id = barrier_id

    def _emit(self, event_type: BarrierEventType, **fields: object) -> str:
        event = BarrierEvent(
            event_id=str(uuid.uuid4()),
            event_type=event_type,
            barrier_id=self._barrier_id,
            created_at=self._now(),
            **fields,  # type: ignore[arg-type]
        )
        return self._store.store_event(event)

    def _now(self) -> str:
        return datetime.now(timezone.utc).isoformat()

    def checkpoint_added(self, name: str, total: int) -> None:
        """Emit CHECKPOINT_ADDED when a new name is registered."""
        self._emit(BarrierEventType.CHECKPOINT_ADDED, checkpoint=name, total=total)

    def asset_requested(self, uri: str) -> None:
        """Emit ASSET_REQUESTED when a fetch is handed to the loader."""
        self._emit(BarrierEventType.ASSET_REQUESTED, checkpoint=uri)

    def asset_failed(self, uri: str, body: str) -> None:
        """Emit ASSET_FAILED when the loader reports a failed fetch."""
        self._emit(BarrierEventType.ASSET_FAILED, checkpoint=uri, summary=body[:500])

    def armed(self, timeout: float | None) -> None:
        """Emit ARMED when the barrier is started."""
        summary = "no timeout" if timeout is None else f"timeout={timeout}s"
        self._emit(BarrierEventType.ARMED, summary=summary)

    def checkpoint_complete(self, name: str, remaining: int, total: int) -> None:
        """Emit CHECKPOINT_COMPLETE when a pending name is resolved."""
        self._emit(
            BarrierEventType.CHECKPOINT_COMPLETE,
            checkpoint=name,
            remaining=remaining,
            total=total,
        )

    def finished(self, reason: CompletionReason, remaining: int, total: int) -> None:
        """Emit FINISHED when the completion sequence runs."""
        self._emit(
            BarrierEventType.FINISHED,
            reason=reason.value,
            remaining=remaining,
            total=total,
        )
