"""Debouncing: collapse bursts of calls into one call after a quiet period.

Usage:
    save = debounce(write_to_disk, delay=500)
    save(doc)   # scheduled
    save(doc)   # previous call dropped, rescheduled

    # Deterministic in tests
    scheduler = ManualScheduler()
    save = debounce(write_to_disk, delay=500, scheduler=scheduler)
    save(doc)
    scheduler.advance(0.5)
"""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable
from typing import Any, Generic, ParamSpec, TypeVar

from utilkit.config import get_settings
from utilkit.scheduling.models import Cancellable, Scheduler, ThreadingScheduler

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


class Debounced(Generic[P, R]):
    """Callable wrapper that runs `fn` only after calls stop for `delay` ms.

    Every call cancels the pending invocation and schedules a new one with
    the latest arguments. Safe to call from several threads; the callback
    may fire on a scheduler thread.

    Args:
        fn: Function to debounce.
        delay: Quiet period in milliseconds.
        scheduler: Timer source used to schedule invocations.
    """

    def __init__(self, fn: Callable[P, R], delay: float, scheduler: Scheduler) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._delay = delay
        self._scheduler = scheduler
        self._lock = threading.Lock()
        self._handle: Cancellable | None = None
        self._call: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._generation = 0

    @property
    def delay(self) -> float:
        """Quiet period in milliseconds."""
        return self._delay

    @property
    def pending(self) -> bool:
        """True while an invocation is scheduled and has not run."""
        with self._lock:
            return self._handle is not None

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                logger.debug("Superseded pending call to %s", self._name)
            self._generation += 1
            self._call = (args, kwargs)
            self._handle = self._scheduler.call_later(
                self._delay / 1000, functools.partial(self._fire, self._generation)
            )

    def cancel(self) -> None:
        """Drop the pending invocation, if any."""
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                logger.debug("Cancelled pending call to %s", self._name)
            self._clear()

    def flush(self) -> R | None:
        """Run the pending invocation now.

        Returns:
            What `fn` returned, or None when nothing was pending.
        """
        with self._lock:
            if self._handle is None or self._call is None:
                return None
            self._handle.cancel()
            args, kwargs = self._call
            self._clear()
        return self._fn(*args, **kwargs)

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A newer call or cancel() won the race with this timer.
            if generation != self._generation or self._call is None:
                return
            args, kwargs = self._call
            self._clear()
        logger.debug("Running debounced call to %s", self._name)
        self._fn(*args, **kwargs)

    def _clear(self) -> None:
        self._generation += 1
        self._handle = None
        self._call = None

    @property
    def _name(self) -> str:
        return getattr(self._fn, "__qualname__", repr(self._fn))


def debounce(
    fn: Callable[P, R],
    delay: float | None = None,
    *,
    scheduler: Scheduler | None = None,
) -> Debounced[P, R]:
    """Return a debounced version of `fn`.

    Only the last call within any `delay` window runs, with that call's
    arguments, `delay` milliseconds after it was made.

    Args:
        fn: Function to debounce.
        delay: Quiet period in milliseconds. Defaults to settings.debounce_delay_ms.
        scheduler: Timer source. Defaults to a ThreadingScheduler.

    Returns:
        A Debounced wrapper; calling it returns None.

    Raises:
        ValueError: If delay is negative.
    """
    if delay is None:
        delay = get_settings().debounce_delay_ms
    return Debounced(fn, delay, scheduler or ThreadingScheduler())
