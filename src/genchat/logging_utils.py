"""Runtime logging helpers."""

from __future__ import annotations

import os
import sys

from loguru import logger

LOG_LEVEL_ENV = "GENCHAT_LOG_LEVEL"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at the requested level."""
    resolved = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=resolved,
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
