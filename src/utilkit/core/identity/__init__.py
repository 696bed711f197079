"""Identity helpers: random id generation."""

from utilkit.core.identity.core import RandomIdGenerator, random_id

__all__ = [
    "random_id",
    "RandomIdGenerator",
]
