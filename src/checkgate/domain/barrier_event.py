"""Barrier execution trace models."""

from dataclasses import dataclass
from enum import Enum


class BarrierEventType(str, Enum):
    """Types of barrier state transitions."""

    CHECKPOINT_ADDED = "CHECKPOINT_ADDED"
    ASSET_REQUESTED = "ASSET_REQUESTED"
    ASSET_FAILED = "ASSET_FAILED"
    ARMED = "ARMED"
    CHECKPOINT_COMPLETE = "CHECKPOINT_COMPLETE"
    FINISHED = "FINISHED"


@dataclass(frozen=True)
class BarrierEvent:
    """Single barrier state transition.

    Represents an atomic event in a barrier's lifetime, capturing
    state changes for observability and debugging.
    """

    event_id: str
    event_type: BarrierEventType
    barrier_id: str
    checkpoint: str | None = None
    remaining: int | None = None
    total: int | None = None
    reason: str | None = None  # "completed" or "timeout"
    summary: str = ""
    created_at: str = ""  # ISO 8601
