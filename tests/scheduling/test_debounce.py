"""Tests for debouncing and the schedulers it runs on.

Critical Invariants:
- Only the last call in a burst runs
- The call runs with the latest arguments
- Cancelled or flushed calls never run again from the timer
"""

import asyncio
import threading
import time

import pytest

from utilkit import (
    AsyncioScheduler,
    ManualScheduler,
    ThreadingScheduler,
    debounce,
    get_settings,
)
from utilkit.scheduling import Cancellable, Scheduler


@pytest.fixture
def calls():
    return []


@pytest.fixture
def record(calls):
    def record(*args, **kwargs):
        """Remember the call."""
        calls.append((args, kwargs))
        return len(calls)

    return record


# Debounce with a manual clock


def test_runs_after_delay(scheduler, record, calls):
    debounced = debounce(record, delay=100, scheduler=scheduler)

    debounced(1)
    scheduler.advance(0.05)
    assert calls == []

    scheduler.advance(0.05)
    assert calls == [((1,), {})]


def test_burst_runs_once_with_latest_arguments(scheduler, record, calls):
    """CRITICAL: Each call resets the window; only the last call runs."""
    debounced = debounce(record, delay=100, scheduler=scheduler)

    debounced(1)
    scheduler.advance(0.05)
    debounced(2)
    scheduler.advance(0.05)
    debounced(3, flag=True)
    scheduler.advance(0.05)
    assert calls == []

    scheduler.advance(0.1)
    assert calls == [((3,), {"flag": True})]
    assert scheduler.pending == 0


def test_separate_windows_each_run(scheduler, record, calls):
    debounced = debounce(record, delay=100, scheduler=scheduler)

    debounced("a")
    scheduler.advance(0.2)
    debounced("b")
    scheduler.advance(0.2)

    assert calls == [(("a",), {}), (("b",), {})]


def test_call_returns_none(scheduler, record):
    debounced = debounce(record, delay=10, scheduler=scheduler)
    assert debounced() is None


def test_pending_flag(scheduler, record):
    debounced = debounce(record, delay=100, scheduler=scheduler)
    assert not debounced.pending

    debounced()
    assert debounced.pending

    scheduler.advance(1)
    assert not debounced.pending


def test_cancel_drops_pending_call(scheduler, record, calls):
    debounced = debounce(record, delay=100, scheduler=scheduler)

    debounced(1)
    debounced.cancel()
    scheduler.advance(1)

    assert calls == []
    assert not debounced.pending


def test_cancel_without_pending_call_is_noop(scheduler, record):
    debounce(record, delay=100, scheduler=scheduler).cancel()


def test_flush_runs_immediately(scheduler, record, calls):
    debounced = debounce(record, delay=100, scheduler=scheduler)

    debounced("now")
    result = debounced.flush()

    assert result == 1
    assert calls == [(("now",), {})]

    scheduler.advance(1)
    assert len(calls) == 1, "Flushed call must not run again"


def test_flush_without_pending_call_returns_none(scheduler, record, calls):
    debounced = debounce(record, delay=100, scheduler=scheduler)
    assert debounced.flush() is None
    assert calls == []


def test_zero_delay(scheduler, record, calls):
    debounced = debounce(record, delay=0, scheduler=scheduler)

    debounced(1)
    debounced(2)
    scheduler.advance(0)

    assert calls == [((2,), {})]


def test_negative_delay_rejected(scheduler, record):
    with pytest.raises(ValueError, match="delay"):
        debounce(record, delay=-1, scheduler=scheduler)


def test_default_delay_from_settings(record, settings_env):
    assert debounce(record).delay == 300

    settings_env.setenv("UTILKIT_DEBOUNCE_DELAY_MS", "50")
    get_settings.cache_clear()
    assert debounce(record).delay == 50


def test_wrapper_keeps_function_metadata(scheduler, record):
    debounced = debounce(record, scheduler=scheduler)

    assert debounced.__name__ == "record"
    assert debounced.__doc__ == "Remember the call."
    assert debounced.__wrapped__ is record


def test_debounced_function_may_call_itself_again(scheduler, calls):
    """Rescheduling from inside the callback does not deadlock."""
    debounced = None

    def again(n):
        calls.append(n)
        if n < 3:
            debounced(n + 1)

    debounced = debounce(again, delay=10, scheduler=scheduler)
    debounced(1)
    scheduler.advance(1)

    assert calls == [1, 2, 3]


# Real timer sources


def test_threading_scheduler_runs_last_call():
    done = threading.Event()
    calls = []

    def record(value):
        calls.append(value)
        done.set()

    debounced = debounce(record, delay=50, scheduler=ThreadingScheduler())
    for value in range(3):
        debounced(value)

    assert done.wait(timeout=5)
    time.sleep(0.1)
    assert calls == [2]


def test_asyncio_scheduler_runs_last_call():
    calls = []

    async def main():
        debounced = debounce(calls.append, delay=20, scheduler=AsyncioScheduler())
        debounced("a")
        debounced("b")
        await asyncio.sleep(0.2)

    asyncio.run(main())
    assert calls == ["b"]


def test_asyncio_scheduler_with_explicit_loop():
    loop = asyncio.new_event_loop()
    try:
        calls = []
        handle = AsyncioScheduler(loop).call_later(0, lambda: calls.append(1))
        loop.run_until_complete(asyncio.sleep(0.05))
        assert calls == [1]
        assert isinstance(handle, Cancellable)
    finally:
        loop.close()


def test_schedulers_satisfy_protocol():
    assert isinstance(ThreadingScheduler(), Scheduler)
    assert isinstance(AsyncioScheduler(), Scheduler)
    assert isinstance(ManualScheduler(), Scheduler)


# Manual scheduler


def test_manual_scheduler_fires_in_due_order(scheduler):
    fired = []
    scheduler.call_later(0.3, lambda: fired.append("late"))
    scheduler.call_later(0.1, lambda: fired.append("early"))
    scheduler.call_later(0.1, lambda: fired.append("early-second"))

    assert scheduler.advance(1) == 3
    assert fired == ["early", "early-second", "late"]


def test_manual_scheduler_clock(scheduler):
    seen = []
    scheduler.call_later(0.25, lambda: seen.append(scheduler.now))

    scheduler.advance(1)

    assert seen == [0.25]
    assert scheduler.now == 1


def test_manual_scheduler_skips_cancelled(scheduler):
    fired = []
    timer = scheduler.call_later(0.1, lambda: fired.append(1))
    timer.cancel()

    assert scheduler.pending == 0
    assert scheduler.advance(1) == 0
    assert fired == []


def test_manual_scheduler_rejects_negative_values(scheduler):
    with pytest.raises(ValueError):
        scheduler.advance(-1)
    with pytest.raises(ValueError):
        scheduler.call_later(-1, lambda: None)
