"""utilkit: small, independent string and object utilities.

Usage:
    from utilkit import deep_clone, slugify, random_id, format_date, group_by, debounce

    slugify("Hello, World!")                     # "hello-world"
    random_id(5)                                 # e.g. "x9k2m"
    format_date(date(2026, 2, 10), "DD/MM/YYYY")  # "10/02/2026"
    group_by([{"cat": "A"}, {"cat": "B"}], "cat")

    original = {"a": 1, "b": {"c": 2}}
    cloned = deep_clone(original)
    cloned["b"]["c"] = 999                       # original untouched

    save = debounce(write_to_disk, delay=300)
"""

__version__ = "0.1.0"

# Configuration
from utilkit.config import UtilSettings, get_settings

# Core utilities
from utilkit.core import (
    CloneDepthError,
    RandomIdGenerator,
    UtilKitError,
    ValueKind,
    clone_temporal,
    deep_clone,
    format_date,
    group_by,
    kind_of,
    random_id,
    slugify,
)

# Scheduling
from utilkit.scheduling import (
    AsyncioScheduler,
    Debounced,
    ManualScheduler,
    Scheduler,
    ThreadingScheduler,
    debounce,
)

__all__ = [
    # Version
    "__version__",
    # Clone
    "deep_clone",
    "clone_temporal",
    "kind_of",
    "ValueKind",
    "CloneDepthError",
    "UtilKitError",
    # Peers
    "slugify",
    "random_id",
    "RandomIdGenerator",
    "format_date",
    "group_by",
    # Scheduling
    "debounce",
    "Debounced",
    "Scheduler",
    "ThreadingScheduler",
    "AsyncioScheduler",
    "ManualScheduler",
    # Config
    "UtilSettings",
    "get_settings",
]
