"""Logging configuration helpers for the trivia application."""

from __future__ import annotations

import logging
import os
from logging import Logger

_LOG_LEVEL_ENV = "TRIVIA_QUIZ_LOG_LEVEL"


def configure_logging() -> Logger:
    """Configure basic logging for the application and return the package logger."""
    level_name = os.environ.get(_LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("trivia_app")
