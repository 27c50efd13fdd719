"""
Task Scheduler

Cancellable delayed callbacks for the cosmetic delays around a
roleplay session (partner "typing", encouragement auto-dismiss).

The session owns every handle it schedules, so pausing, ending or
discarding a session can cancel pending work instead of waiting for
a stale callback to fire.

Two implementations:
- AsyncioScheduler: real delays on a running event loop
- ManualScheduler: virtual time advanced by the caller
"""

import asyncio
import heapq
import itertools
from typing import Callable, Optional, Protocol

from ginger.config.logging_config import get_logger

logger = get_logger(__name__)


class TaskHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        ...

    @property
    def cancelled(self) -> bool:
        ...

    @property
    def done(self) -> bool:
        ...


class TaskScheduler(Protocol):
    """Schedules a zero-argument callback after a delay."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> TaskHandle:
        ...


class _ManualTask:
    """Task record for ManualScheduler."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self._callback = callback
        self._cancelled = False
        self._done = False

    def cancel(self) -> None:
        if not self._done:
            self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    def run(self) -> None:
        self._done = True
        self._callback()


class ManualScheduler:
    """
    Scheduler driven by virtual time.

    Callbacks only run when the owner calls advance() or run_all().
    Callbacks due at the same instant run in scheduling order.

    Usage:
        scheduler = ManualScheduler()
        scheduler.schedule(1.5, reply)
        scheduler.advance(1.5)  # reply runs here
    """

    def __init__(self) -> None:
        self._time = 0.0
        self._queue: list[tuple[float, int, _ManualTask]] = []
        self._sequence = itertools.count()

    @property
    def time(self) -> float:
        """Virtual seconds elapsed."""
        return self._time

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> _ManualTask:
        task = _ManualTask(self._time + max(0.0, delay_seconds), callback)
        heapq.heappush(self._queue, (task.due, next(self._sequence), task))
        return task

    def pending_count(self) -> int:
        """Number of scheduled callbacks not yet run or cancelled."""
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move virtual time forward, running every callback that falls due.

        Callbacks scheduled by a running callback are honoured if they
        fall due within the same window.

        Args:
            seconds: Virtual seconds to advance

        Returns:
            Number of callbacks run
        """
        target = self._time + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, task = heapq.heappop(self._queue)
            self._time = max(self._time, due)
            if task.cancelled:
                continue
            task.run()
            ran += 1
        self._time = target
        return ran

    def run_all(self) -> int:
        """Run everything pending, advancing virtual time as needed."""
        ran = 0
        while self._queue:
            due = self._queue[0][0]
            ran += self.advance(max(0.0, due - self._time))
        return ran


class _AsyncioTask:
    """Task record wrapping an asyncio TimerHandle."""

    def __init__(self) -> None:
        self._timer: Optional[asyncio.TimerHandle] = None
        self._cancelled = False
        self._done = False

    def cancel(self) -> None:
        if self._done:
            return
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done


class AsyncioScheduler:
    """
    Scheduler backed by an asyncio event loop.

    Uses loop.call_later so every delay is cancellable. Exceptions
    raised by a callback are logged and re-raised into the loop's
    exception handler.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> _AsyncioTask:
        task = _AsyncioTask()

        def _run() -> None:
            if task.cancelled:
                return
            task._done = True
            try:
                callback()
            except Exception as e:
                logger.error(
                    "Scheduled callback failed",
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise

        task._timer = self._get_loop().call_later(max(0.0, delay_seconds), _run)
        return task
