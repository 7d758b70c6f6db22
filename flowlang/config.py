"""Configuration for the FlowLang runtime using Pydantic Settings.

Environment variables:
    FLOWLANG_LOG_LEVEL: Logging level for the ``flowlang`` logger
    FLOWLANG_ECHO_SHOWS: Print shown values to stdout when no sink is given
    FLOWLANG_NOW: Fixed ``HH:MM`` clock used when a program reads ``time``
"""

from __future__ import annotations

from datetime import date, datetime, time
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FlowSettings(BaseSettings):
    """Settings shared by the parser and evaluator.

    Example:
        >>> settings = FlowSettings(now="23:00", echo_shows=True)
        >>> settings.fixed_clock().hour
        23
    """

    model_config = SettingsConfigDict(
        env_prefix='FLOWLANG_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    echo_shows: bool = Field(
        default=False,
        description="Print shown values when no display sink is supplied"
    )

    now: Optional[str] = Field(
        default=None,
        pattern=r"^[0-9]{2}:[0-9]{2}$",
        description="Fixed HH:MM wall clock for time comparisons"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("now")
    @classmethod
    def validate_now(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        hours, minutes = (int(part) for part in v.split(":"))
        if hours > 23 or minutes > 59:
            raise ValueError(f"Clock override out of range: {v}")
        return v

    def fixed_clock(self) -> Optional[datetime]:
        """The configured clock as a datetime today, or None for the real clock."""
        if self.now is None:
            return None
        hours, minutes = (int(part) for part in self.now.split(":"))
        return datetime.combine(date.today(), time(hours, minutes))


@lru_cache()
def get_settings() -> FlowSettings:
    return FlowSettings()


__all__ = ["FlowSettings", "get_settings"]
