"""Logging setup for FlowLang."""

from __future__ import annotations

import logging
from typing import Optional

from flowlang.config import get_settings

_LOGGER_NAME = "flowlang"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Install a single stream handler on the ``flowlang`` logger.

    Falls back to ``FlowSettings.log_level`` when *level* is not given.
    Calling it again replaces the handler rather than stacking another.
    """
    log_level = (level or get_settings().log_level).upper()
    logger = logging.getLogger(_LOGGER_NAME)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.handlers = [handler]
    logger.setLevel(getattr(logging, log_level, logging.WARNING))
    return logger


__all__ = ["configure_logging"]
