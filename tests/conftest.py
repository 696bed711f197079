"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from utilkit import ManualScheduler, get_settings


@pytest.fixture
def settings_env(monkeypatch):
    """monkeypatch with the settings cache cleared, so env overrides take effect."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def scheduler():
    """Manual scheduler with its clock at zero."""
    return ManualScheduler()
