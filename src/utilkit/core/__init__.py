"""Core functionalities: stateless, pure utility functions.

Architecture Note:
    core/ contains pure functions with no shared state: each call works only
    on its arguments and freshly allocated results. Stateful helpers that
    deal with time (debouncing) live in scheduling/.
"""

from utilkit.core.clone import (
    CloneDepthError,
    ValueKind,
    clone_temporal,
    deep_clone,
    kind_of,
)
from utilkit.core.errors import UtilKitError
from utilkit.core.grouping import group_by
from utilkit.core.identity import RandomIdGenerator, random_id
from utilkit.core.temporal import format_date
from utilkit.core.text import slugify
from utilkit.core.types import Primitive, Record, Temporal, Value

__all__ = [
    # Types
    "Primitive",
    "Temporal",
    "Value",
    "Record",
    # Errors
    "UtilKitError",
    "CloneDepthError",
    # Clone
    "deep_clone",
    "clone_temporal",
    "kind_of",
    "ValueKind",
    # Peers
    "slugify",
    "random_id",
    "RandomIdGenerator",
    "format_date",
    "group_by",
]
