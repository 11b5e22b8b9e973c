"""Barrier event store implementations."""

from checkgate.domain.barrier_event import BarrierEvent, BarrierEventType
from checkgate.domain.interfaces import BarrierEventStoreInterface


class InMemoryBarrierEventStore(BarrierEventStoreInterface):
    """In-memory implementation for testing and debugging."""

    def __init__(self) -> None:
        self._events: list[BarrierEvent] = []

    def store_event(self, event: BarrierEvent) -> str:
        self._events.append(event)
        return event.event_id

    def get_events(
        self,
        barrier_id: str,
        event_type: BarrierEventType | None = None,
    ) -> list[BarrierEvent]:
        # Insertion order; timestamps can tie within one clock tick
        return [
            e
            for e in self._events
            if e.barrier_id == barrier_id
            and (event_type is None or e.event_type == event_type)
        ]

    def barrier_ids(self) -> list[str]:
        """Distinct barrier IDs seen, in first-event order."""
        return list(dict.fromkeys(e.barrier_id for e in self._events))

    def clear(self) -> None:
        self._events.clear()
