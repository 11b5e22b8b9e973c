"""
Application layer for the completion barrier.

Contains the barrier itself and the services that observe it.
"""

from checkgate.application.barrier import Barrier
from checkgate.application.barrier_event_emitter import BarrierEventEmitter

__all__ = [
    "Barrier",
    "BarrierEventEmitter",
]
