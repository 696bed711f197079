"""Deep cloning of nested values.

Usage:
    original = {"a": 1, "b": {"c": 2}}
    cloned = deep_clone(original)
    cloned["b"]["c"] = 999
    assert original["b"]["c"] == 2

Walks the value with an explicit stack instead of recursion, so nesting depth
is limited by max_depth rather than by the interpreter's recursion limit.
"""

from __future__ import annotations

import datetime
import warnings
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from utilkit.config import get_settings
from utilkit.core.clone.models import CloneDepthError, ValueKind, kind_of

T = TypeVar("T")


@dataclass(slots=True)
class _Frame:
    """A container being copied: its remaining entries and the partial copy."""

    entries: Iterator[tuple[Any, Any]]
    target: list[Any] | dict[Any, Any]
    depth: int
    key: Any = None
    """Where the finished copy goes in the parent frame."""

    as_tuple: bool = False

    def store(self, key: Any, value: Any) -> None:
        if isinstance(self.target, list):
            self.target.append(value)
        else:
            self.target[key] = value

    def finish(self) -> Any:
        if self.as_tuple:
            return tuple(self.target)
        return self.target


def clone_temporal(value: T) -> T:
    """Return a new date/datetime/time instance holding the same fields.

    datetime objects are immutable, but callers rely on the copy being a
    distinct instance, so it is rebuilt field by field.
    """
    if isinstance(value, datetime.datetime):
        return type(value)(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            tzinfo=value.tzinfo,
            fold=value.fold,
        )
    if isinstance(value, datetime.date):
        return type(value)(value.year, value.month, value.day)
    if isinstance(value, datetime.time):
        return type(value)(
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            tzinfo=value.tzinfo,
            fold=value.fold,
        )
    raise TypeError(f"{type(value).__name__} is not a date, datetime or time")


def _open_frame(value: Any, depth: int, max_depth: int, key: Any = None) -> _Frame:
    """Start copying a SEQUENCE or RECORD value."""
    if depth > max_depth:
        raise CloneDepthError(max_depth)

    if isinstance(value, list | tuple):
        return _Frame(
            entries=enumerate(value),
            target=[],
            depth=depth,
            key=key,
            as_tuple=isinstance(value, tuple),
        )

    if isinstance(value, Mapping):
        return _Frame(entries=iter(value.items()), target={}, depth=depth, key=key)

    warnings.warn(
        f"deep_clone() does not support {type(value).__name__}; "
        f"copying its instance attributes into a dict.",
        stacklevel=3,
    )
    attributes = getattr(value, "__dict__", {})
    return _Frame(entries=iter(dict(attributes).items()), target={}, depth=depth, key=key)


def deep_clone(value: T, *, max_depth: int | None = None) -> T:
    """Return a deep copy of a nested value.

    Primitives (None, bool, numbers, str) come back unchanged, as do enum
    members, classes, modules and other callables. Dates, times
    and datetimes are rebuilt as new instances. Lists and tuples are copied
    into new containers of the same kind, mappings into new dicts, with every
    element cloned and order preserved. Other objects are copied into a dict
    of their instance attributes, with a warning.

    Args:
        value: Value to copy.
        max_depth: Deepest container nesting accepted. The outermost
            container is depth 0. Defaults to settings.clone_max_depth.

    Returns:
        A value deeply equal to the input that shares no container with it.

    Raises:
        CloneDepthError: If containers nest deeper than max_depth, including
            any circular structure.
        ValueError: If max_depth is negative.
    """
    limit = get_settings().clone_max_depth if max_depth is None else max_depth
    if limit < 0:
        raise ValueError(f"max_depth must be >= 0, got {limit}")

    kind = kind_of(value)
    if kind.is_leaf:
        return value
    if kind is ValueKind.TEMPORAL:
        return clone_temporal(value)

    stack = [_open_frame(value, 0, limit)]
    while True:
        frame = stack[-1]
        for key, child in frame.entries:
            child_kind = kind_of(child)
            if child_kind.is_leaf:
                frame.store(key, child)
            elif child_kind is ValueKind.TEMPORAL:
                frame.store(key, clone_temporal(child))
            else:
                stack.append(_open_frame(child, frame.depth + 1, limit, key=key))
                break
        else:
            stack.pop()
            result = frame.finish()
            if not stack:
                return result  # type: ignore[no-any-return]
            stack[-1].store(frame.key, result)
