"""Value classification and clone errors.

Usage:
    kind_of(3.5)          # ValueKind.NUMBER
    kind_of({"a": 1})     # ValueKind.RECORD
    kind_of(Color.RED)    # ValueKind.OPAQUE
    ValueKind.STRING.is_primitive  # True
"""

from __future__ import annotations

import datetime
import numbers
import types
from collections.abc import Mapping
from enum import Enum, auto
from typing import Any

from utilkit.core.errors import UtilKitError


class ValueKind(Enum):
    """The variant a value belongs to, as seen by deep_clone()."""

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    TEMPORAL = auto()
    """datetime.datetime, datetime.date or datetime.time."""

    SEQUENCE = auto()
    """list or tuple."""

    RECORD = auto()
    """Any mapping, and every object-like value no other variant matches."""

    OPAQUE = auto()
    """Enum members, classes, modules and callables. Shared, never copied."""

    @property
    def is_primitive(self) -> bool:
        return self in _PRIMITIVE_KINDS

    @property
    def is_leaf(self) -> bool:
        """True for kinds deep_clone() returns as-is."""
        return self.is_primitive or self is ValueKind.OPAQUE


_PRIMITIVE_KINDS = frozenset({ValueKind.NULL, ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING})


def kind_of(value: Any) -> ValueKind:
    """Classify a value into its ValueKind.

    Total over all Python objects: anything not matched explicitly is treated
    as a RECORD. Any numbers.Number (Decimal, Fraction, complex) is a NUMBER.

    Args:
        value: Any object.

    Returns:
        The matching ValueKind.
    """
    match value:
        case None:
            return ValueKind.NULL
        case bool():
            return ValueKind.BOOL
        case numbers.Number():
            return ValueKind.NUMBER
        case str():
            return ValueKind.STRING
        case datetime.date() | datetime.time():
            return ValueKind.TEMPORAL
        case list() | tuple():
            return ValueKind.SEQUENCE
        case Mapping():
            return ValueKind.RECORD
        case Enum() | type() | types.ModuleType():
            return ValueKind.OPAQUE
        case _ if callable(value):
            return ValueKind.OPAQUE
        case _:
            # Every other object-like value
            return ValueKind.RECORD


class CloneDepthError(UtilKitError, RecursionError):
    """Raised when a value nests containers deeper than the allowed limit.

    Also the outcome for circular structures, which nest without end.
    """

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Value nests containers deeper than max_depth={max_depth}")
        self.max_depth = max_depth
