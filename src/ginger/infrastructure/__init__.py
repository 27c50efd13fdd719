"""
Ginger Infrastructure Layer

Time, scheduling and metrics adapters used by the engine.
"""

from ginger.infrastructure.clock import Clock, FixedClock, SystemClock
from ginger.infrastructure.scheduler import (
    AsyncioScheduler,
    ManualScheduler,
    TaskHandle,
    TaskScheduler,
)

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "TaskScheduler",
    "TaskHandle",
    "AsyncioScheduler",
    "ManualScheduler",
]
