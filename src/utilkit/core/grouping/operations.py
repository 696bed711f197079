"""Partitioning records into groups."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")


def _key_getter(key: str | Callable[[Any], Hashable]) -> Callable[[Any], Hashable]:
    if callable(key):
        return key

    def get(item: Any) -> Hashable:
        if isinstance(item, Mapping):
            return item.get(key)
        return getattr(item, key, None)

    return get


def group_by(items: Iterable[T], key: str | Callable[[T], Hashable]) -> dict[Hashable, list[T]]:
    """Group items by the value they hold under `key`.

    Groups appear in the order their first member is seen; items keep their
    input order within a group. Items are placed in the groups as-is, not
    copied.

    Args:
        items: Records to group (mappings, or objects with attributes).
        key: Field name to group on, or a callable returning the group.
            Items missing the field are grouped under None.

    Returns:
        Mapping from group value to the list of its items.

    Raises:
        TypeError: If an item's group value is unhashable (a list or dict, say).
    """
    get = _key_getter(key)
    groups: dict[Hashable, list[T]] = {}
    for item in items:
        group = get(item)
        try:
            members = groups.setdefault(group, [])
        except TypeError as e:
            raise TypeError(
                f"group_by() key {key!r} gave an unhashable {type(group).__name__} group value"
            ) from e
        members.append(item)
    return groups
