"""Configuration settings using Pydantic Settings.

Every utility that takes an optional argument (id length, date pattern,
debounce delay, clone depth limit) falls back to these values when the caller
passes None.

Usage:
    from utilkit.config import get_settings

    # Load from environment variables (UTILKIT_*)
    settings = get_settings()

    # Reload after changing the environment
    get_settings.cache_clear()
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ID_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"


class UtilSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for the utility functions.

    Attributes:
        id_length: Length of ids produced by random_id().
        id_alphabet: Characters random_id() draws from.
        date_pattern: Pattern used by format_date() when none is given.
        debounce_delay_ms: Quiet window for debounce(), in milliseconds.
        clone_max_depth: Deepest container nesting deep_clone() accepts.

    Environment Variables:
        UTILKIT_ID_LENGTH
        UTILKIT_ID_ALPHABET
        UTILKIT_DATE_PATTERN
        UTILKIT_DEBOUNCE_DELAY_MS
        UTILKIT_CLONE_MAX_DEPTH
    """

    model_config = SettingsConfigDict(
        env_prefix="UTILKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    id_length: int = Field(default=6, ge=0)
    id_alphabet: str = DEFAULT_ID_ALPHABET
    date_pattern: str = "YYYY-MM-DD"
    debounce_delay_ms: float = Field(default=300.0, ge=0)
    clone_max_depth: int = Field(default=1000, ge=0)

    @field_validator("id_alphabet")
    @classmethod
    def _alphabet_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("id_alphabet must contain at least one character")
        return value


@lru_cache(maxsize=1)
def get_settings() -> UtilSettings:
    """Return the process-wide settings, loaded once from the environment."""
    return UtilSettings()
