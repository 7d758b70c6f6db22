from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from flowlang.config import FlowSettings, get_settings
from flowlang.observability import configure_logging


def test_defaults(settings) -> None:
    assert settings.log_level == "WARNING"
    assert settings.echo_shows is False
    assert settings.now is None
    assert settings.fixed_clock() is None


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("FLOWLANG_LOG_LEVEL", "debug")
    monkeypatch.setenv("FLOWLANG_ECHO_SHOWS", "true")
    monkeypatch.setenv("FLOWLANG_NOW", "06:45")

    settings = FlowSettings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.echo_shows is True
    clock = settings.fixed_clock()
    assert (clock.hour, clock.minute) == (6, 45)


@pytest.mark.parametrize("now", ["6:45", "24:00", "12:60", "noon"])
def test_invalid_clock_override(now: str) -> None:
    with pytest.raises(ValidationError):
        FlowSettings(_env_file=None, now=now)


def test_invalid_log_level() -> None:
    with pytest.raises(ValidationError):
        FlowSettings(_env_file=None, log_level="LOUD")


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_configure_logging_installs_single_handler() -> None:
    logger = configure_logging("debug")
    configure_logging("info")

    assert logger.name == "flowlang"
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
