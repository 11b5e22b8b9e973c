"""
Domain layer for the completion barrier.

Contains the barrier's value types and ports, with no external dependencies.
"""

from checkgate.domain.barrier_event import BarrierEvent, BarrierEventType
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
    FetchCallback,
    ProgressCallback,
)

__all__ = [
    # Models
    "BarrierSnapshot",
    "CompletionReason",
    "CompletionResult",
    # Callback signatures
    "CompletionCallback",
    "FetchCallback",
    "ProgressCallback",
    # Trace
    "BarrierEvent",
    "BarrierEventType",
    # Interfaces
    "BarrierEventStoreInterface",
    "ResourceLoaderInterface",
    "SchedulerInterface",
    "TimerHandleInterface",
]
