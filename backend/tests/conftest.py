"""Root conftest — shared test configuration."""

import os

import pytest

# Tests must not pick up a developer's log settings
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """get_settings() is lru_cached — clear it around every test."""
    from luach.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
