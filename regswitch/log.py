"""Logging setup — stderr output through rich."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from regswitch.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(value: str | None) -> str:
    """Normalize a level name, falling back to the default for unknown values."""
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in VALID_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger("regswitch")
    logger.setLevel(resolve_level(level or os.getenv(LOG_LEVEL_ENV)))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
