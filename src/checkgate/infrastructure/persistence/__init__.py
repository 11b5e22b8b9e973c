"""
Event trace storage for barriers.
"""

from checkgate.infrastructure.persistence.barrier_events import (
    InMemoryBarrierEventStore,
)

__all__ = [
    "InMemoryBarrierEventStore",
]
