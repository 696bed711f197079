"""Text helpers."""

from utilkit.core.text.operations import slugify

__all__ = [
    "slugify",
]
