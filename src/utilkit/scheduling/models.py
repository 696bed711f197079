"""Timer sources for delayed callbacks.

All schedulers share one small protocol, `call_later(delay, callback)`,
returning a handle with `cancel()`. debounce() takes any of them:

    ThreadingScheduler()   # default, threading.Timer per call
    AsyncioScheduler()     # loop.call_later on the running event loop
    ManualScheduler()      # virtual clock, advanced explicitly in tests
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Cancellable(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from running if it has not run yet."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Protocol for timer sources.

    Implementations run `callback` once, roughly `delay` seconds after the
    call, unless the returned handle is cancelled first.
    """

    def call_later(self, delay: float, callback: Callable[[], object]) -> Cancellable:
        """Schedule callback to run after delay seconds."""
        ...


class ThreadingScheduler:
    """Runs each callback on its own daemon threading.Timer."""

    def call_later(self, delay: float, callback: Callable[[], object]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class AsyncioScheduler:
    """Schedules callbacks on an asyncio event loop.

    Args:
        loop: Loop to schedule on. When None, the loop running at the time of
            each call_later() is used, so calls must come from inside a coroutine.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], object]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


@dataclass(order=True)
class ManualTimer:
    """A callback waiting on a ManualScheduler."""

    due: float
    sequence: int
    callback: Callable[[], object] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic scheduler driven by a virtual clock.

    Nothing runs until advance() is called. Callbacks fire in due-time order
    (ties in scheduling order) on the calling thread, and the clock reads
    each callback's due time while it runs.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._timers: list[ManualTimer] = []
        self._sequence = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of scheduled, not cancelled, callbacks."""
        return sum(1 for timer in self._timers if not timer.cancelled)

    def call_later(self, delay: float, callback: Callable[[], object]) -> ManualTimer:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        timer = ManualTimer(self._now + delay, next(self._sequence), callback)
        heapq.heappush(self._timers, timer)
        return timer

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that comes due.

        Callbacks scheduled while advancing also run if they fall due within
        the window.

        Returns:
            Number of callbacks that ran.
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance the clock backwards ({seconds})")
        target = self._now + seconds
        fired = 0
        while self._timers and self._timers[0].due <= target:
            timer = heapq.heappop(self._timers)
            if timer.cancelled:
                continue
            self._now = timer.due
            timer.callback()
            fired += 1
        self._now = target
        return fired
