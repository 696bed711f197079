"""Pure string transformations."""

from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(text: str) -> str:
    """Convert text into a URL-friendly slug.

    Lowercases the text, drops every character that is not a lowercase
    ASCII letter, digit, whitespace or hyphen, trims the ends and turns each
    run of whitespace into a single hyphen. Existing hyphens are kept as-is.

    Args:
        text: Text to convert.

    Returns:
        The slug, e.g. "hello-world" for "Hello, World!".

    Raises:
        TypeError: If text is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(f"slugify() expects str, got {type(text).__name__}")
    cleaned = _DISALLOWED.sub("", text.lower()).strip()
    return _WHITESPACE_RUN.sub("-", cleaned)
