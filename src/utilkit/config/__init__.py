"""Configuration module using Pydantic Settings.

Provides typed defaults for the utilities with environment variable support.

Usage:
    from utilkit.config import UtilSettings, get_settings

    settings = get_settings()
    custom = UtilSettings(id_length=12)
"""

from utilkit.config.settings import UtilSettings, get_settings

__all__ = [
    "UtilSettings",
    "get_settings",
]
