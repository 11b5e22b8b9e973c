"""
Domain models for the completion barrier.

Pure data structures describing why a barrier finished and what it
looked like at a point in time. All models are immutable.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class CompletionReason(str, Enum):
    """Terminal classification of why a barrier fired."""

    COMPLETED = "completed"  # Every checkpoint was marked complete
    TIMED_OUT = "timeout"  # The clock expired first


@dataclass(frozen=True)
class CompletionResult:
    """Payload delivered once to the completion observer."""

    reason: CompletionReason

    @property
    def completed(self) -> bool:
        return self.reason is CompletionReason.COMPLETED

    @property
    def timed_out(self) -> bool:
        return self.reason is CompletionReason.TIMED_OUT


@dataclass(frozen=True)
class BarrierSnapshot:
    """Point-in-time view of a barrier's state."""

    barrier_id: str
    pending: tuple[str, ...]  # Insertion order
    total_count: int  # Distinct names ever registered
    armed: bool
    finished: bool
    result: CompletionResult | None = None

    @property
    def remaining(self) -> int:
        return len(self.pending)


# Observer signatures
ProgressCallback = Callable[[str, int, int], None]  # (name, remaining, total)
CompletionCallback = Callable[[CompletionResult], None]

# Resource loader callbacks: (uri, body)
FetchCallback = Callable[[str, str], None]
