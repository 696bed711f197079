"""Delayed execution: timer sources and debouncing."""

from utilkit.scheduling.debounce import Debounced, debounce
from utilkit.scheduling.models import (
    AsyncioScheduler,
    Cancellable,
    ManualScheduler,
    ManualTimer,
    Scheduler,
    ThreadingScheduler,
)

__all__ = [
    # Debouncing
    "debounce",
    "Debounced",
    # Schedulers
    "ThreadingScheduler",
    "AsyncioScheduler",
    "ManualScheduler",
    "ManualTimer",
    # Protocols
    "Scheduler",
    "Cancellable",
]
