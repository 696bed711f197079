"""Temporal helpers: date formatting."""

from utilkit.core.temporal.operations import format_date

__all__ = [
    "format_date",
]
