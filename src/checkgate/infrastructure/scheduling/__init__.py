"""
Timer adapters for barrier timeouts and asynchronous delivery.
"""

from checkgate.infrastructure.scheduling.asyncio_scheduler import AsyncioScheduler
from checkgate.infrastructure.scheduling.manual import ManualScheduler

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
]
