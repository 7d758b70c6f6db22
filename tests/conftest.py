"""Shared pytest fixtures for the FlowLang test suite."""

from datetime import datetime

import pytest

from flowlang.config import FlowSettings, get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep FLOWLANG_* variables from the outer environment out of the tests."""
    for name in ("FLOWLANG_LOG_LEVEL", "FLOWLANG_ECHO_SHOWS", "FLOWLANG_NOW"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default settings that ignore any .env file."""
    return FlowSettings(_env_file=None)


@pytest.fixture
def clock():
    """Build a fixed wall clock at the given hour and minute."""
    def _clock(hour: int, minute: int = 0) -> datetime:
        return datetime(2024, 1, 1, hour, minute)
    return _clock
