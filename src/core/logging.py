"""Logging configuration for the randomizer package.

All package loggers live under the ``randomizer`` namespace so a single call
to :func:`configure_logging` controls their output.
"""

from __future__ import annotations

import logging
from typing import TextIO

__all__ = ["LOGGER_NAME", "LOG_FORMAT", "get_logger", "configure_logging"]

LOGGER_NAME = "randomizer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Dotted suffix, e.g. ``"sampling.runner"``. None returns the root
            package logger.
    """
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: int | str = "WARNING", *, stream: TextIO | None = None) -> logging.Logger:
    """Install a stream handler on the package logger.

    Calling this again replaces the previously installed handler instead of
    stacking a second one.

    Args:
        level: Logging level name or number.
        stream: Target stream (defaults to stderr).

    Returns:
        The configured package logger.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_randomizer_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._randomizer_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
