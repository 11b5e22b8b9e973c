"""
checkgate: a completion barrier for heterogeneous asynchronous work.

Tracks a dynamic set of named checkpoints and fires a single completion
signal exactly once, either when every checkpoint is done or when an
optional timeout elapses first.

Example:
    import asyncio
    from checkgate import Barrier

    async def main():
        done = asyncio.get_running_loop().create_future()
        barrier = Barrier(done.set_result, timeout=2.0)
        barrier.add_checkpoints(["config", "session"])
        barrier.add_assets("https://example.com/logo.png")
        barrier.start()
        barrier.mark_complete("config")
        barrier.mark_complete("session")
        result = await done  # CompletionResult(reason=COMPLETED) or TIMED_OUT
"""

# Application layer
from checkgate.application.barrier import Barrier
from checkgate.application.barrier_event_emitter import BarrierEventEmitter

# Domain models and trace
from checkgate.domain.barrier_event import BarrierEvent, BarrierEventType

# Domain interfaces (for type hints and custom implementations)
from checkgate.domain.interfaces import (
    BarrierEventStoreInterface,
    ResourceLoaderInterface,
    SchedulerInterface,
    TimerHandleInterface,
)
from checkgate.domain.models import (
    BarrierSnapshot,
    CompletionReason,
    CompletionResult,
)

# Infrastructure (explicit import encouraged for dependency injection)
from checkgate.infrastructure.loaders import (
    HttpResourceLoader,
    HttpResourceLoaderConfig,
    MockResourceLoader,
)
from checkgate.infrastructure.persistence import InMemoryBarrierEventStore
from checkgate.infrastructure.registry import LoaderRegistry
from checkgate.infrastructure.scheduling import AsyncioScheduler, ManualScheduler

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "BarrierSnapshot",
    "CompletionReason",
    "CompletionResult",
    "BarrierEvent",
    "BarrierEventType",
    # Domain interfaces
    "BarrierEventStoreInterface",
    "ResourceLoaderInterface",
    "SchedulerInterface",
    "TimerHandleInterface",
    # Application layer
    "Barrier",
    "BarrierEventEmitter",
    # Infrastructure - Loaders
    "HttpResourceLoader",
    "HttpResourceLoaderConfig",
    "MockResourceLoader",
    # Infrastructure - Scheduling
    "AsyncioScheduler",
    "ManualScheduler",
    # Infrastructure - Persistence
    "InMemoryBarrierEventStore",
    # Infrastructure - Registry
    "LoaderRegistry",
]
