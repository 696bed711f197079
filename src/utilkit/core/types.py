"""Core type definitions for utilkit."""

import datetime
from collections.abc import Mapping
from typing import Any

type Primitive = None | bool | int | float | str
"""Immutable leaves. Returned as-is by deep_clone()."""

type Temporal = datetime.date | datetime.time
"""A calendar date, a date and time, or a time of day (datetime subclasses date)."""

type Value = Primitive | Temporal | list[Value] | tuple[Value, ...] | Mapping[Any, Value]
"""The closed set of shapes deep_clone() operates on."""

type Record = Mapping[str, Any]
"""A keyed structured object, as consumed by group_by()."""
