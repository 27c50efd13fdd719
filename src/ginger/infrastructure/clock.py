"""
Clock

Time source port for the engine. Logic never reads the wall clock
directly; it asks an injected Clock.
"""

from datetime import datetime, timedelta
from typing import Optional, Protocol


class Clock(Protocol):
    """Anything that can report the current time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock time (naive UTC, matching the rest of the codebase)."""

    def now(self) -> datetime:
        return datetime.utcnow()


class FixedClock:
    """
    Manually controlled clock.

    Usage:
        clock = FixedClock(datetime(2024, 1, 1, 9, 0))
        clock.advance(seconds=90)
    """

    def __init__(self, start: Optional[datetime] = None) -> None:
        self._now = start or datetime(2024, 1, 1)

    def now(self) -> datetime:
        return self._now

    def set(self, value: datetime) -> None:
        self._now = value

    def advance(self, seconds: float = 0.0, hours: float = 0.0) -> datetime:
        """Move time forward and return the new current time."""
        self._now = self._now + timedelta(seconds=seconds, hours=hours)
        return self._now
