"""Grouping helpers."""

from utilkit.core.grouping.operations import group_by

__all__ = [
    "group_by",
]
