"""
Infrastructure layer for the completion barrier.

Contains adapters for external concerns (timers, network, trace storage, registry).
"""

from checkgate.infrastructure.loaders import (
    HttpResourceLoader,
    HttpResourceLoaderConfig,
    MockResourceLoader,
)
from checkgate.infrastructure.persistence import InMemoryBarrierEventStore
from checkgate.infrastructure.registry import LoaderRegistry
from checkgate.infrastructure.scheduling import AsyncioScheduler, ManualScheduler

__all__ = [
    # Loaders
    "HttpResourceLoader",
    "HttpResourceLoaderConfig",
    "MockResourceLoader",
    # Scheduling
    "AsyncioScheduler",
    "ManualScheduler",
    # Persistence
    "InMemoryBarrierEventStore",
    # Registry
    "LoaderRegistry",
]
