"""
Domain interfaces (Ports) for the completion barrier.

These abstract base classes define the contracts that collaborators must
satisfy. They have no external dependencies and mark the boundary between
the barrier and the host environment (timers, network, trace storage).
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from checkgate.domain.barrier_event import BarrierEvent, BarrierEventType
    from checkgate.domain.models import FetchCallback


class ResourceLoaderInterface(ABC):
    """
    Port for fetching remote assets.

    Implementations connect to a network stack (or fake one in tests).

    Note (Delivery Contract):
        Exactly one of the callbacks is invoked exactly once per fetch()
        under normal operation, and never synchronously from within
        fetch() itself. The barrier relies on this to stay free of
        re-entrant calls while it is registering assets.
    """

    @abstractmethod
    def fetch(
        self,
        uri: str,
        on_success: "FetchCallback",
        on_failure: Optional["FetchCallback"] = None,
    ) -> None:
        """
        Request a resource without blocking.

        Args:
            uri: Resource to fetch
            on_success: Called with (uri, body) once the resource arrived
            on_failure: Called with (uri, body) if the fetch failed
        """
        pass


class TimerHandleInterface(ABC):
    """Port for a single scheduled callback that may still be cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Cancelling twice is harmless."""
        pass


class SchedulerInterface(ABC):
    """
    Port for the host's timer facility.

    Callbacks run later on the same thread that owns the scheduler.
    """

    @abstractmethod
    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> TimerHandleInterface:
        """
        Schedule a callback.

        Args:
            delay: Seconds to wait before running the callback
            callback: Zero-argument callable

        Returns:
            Handle that can cancel the pending callback
        """
        pass


class BarrierEventStoreInterface(ABC):
    """Port for persisting barrier trace events."""

    @abstractmethod
    def store_event(self, event: "BarrierEvent") -> str:
        """
        Store a single event.

        Returns:
            The event_id
        """
        pass

    @abstractmethod
    def get_events(
        self,
        barrier_id: str,
        event_type: Optional["BarrierEventType"] = None,
    ) -> list["BarrierEvent"]:
        """
        Retrieve events for a barrier, oldest first.

        Args:
            barrier_id: Barrier whose trace to read
            event_type: Optional filter on the event type
        """
        pass
