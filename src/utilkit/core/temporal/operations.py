"""Date formatting with a small token language.

Supported tokens: YYYY, MM, DD, HH, mm, ss.
"""

from __future__ import annotations

import datetime

from utilkit.config import get_settings


def format_date(value: datetime.date, pattern: str | None = None) -> str:
    """Format a date or datetime using YYYY/MM/DD/HH/mm/ss tokens.

    Tokens are substituted one after another in the order YYYY, MM, DD, HH,
    mm, ss, and only the first occurrence of each is replaced. Anything else
    in the pattern is copied through.

    Args:
        value: Date to format. A plain date renders HH, mm and ss as "00".
        pattern: Format pattern. Defaults to settings.date_pattern.

    Returns:
        The formatted string, e.g. "10/02/2026" for pattern "DD/MM/YYYY".

    Raises:
        TypeError: If value is not a date or datetime.
    """
    if not isinstance(value, datetime.date):
        raise TypeError(f"format_date() expects a date or datetime, got {type(value).__name__}")
    if pattern is None:
        pattern = get_settings().date_pattern

    if isinstance(value, datetime.datetime):
        hour, minute, second = value.hour, value.minute, value.second
    else:
        hour = minute = second = 0

    replacements = (
        ("YYYY", str(value.year)),
        ("MM", f"{value.month:02d}"),
        ("DD", f"{value.day:02d}"),
        ("HH", f"{hour:02d}"),
        ("mm", f"{minute:02d}"),
        ("ss", f"{second:02d}"),
    )
    result = pattern
    for token, replacement in replacements:
        result = result.replace(token, replacement, 1)
    return result
