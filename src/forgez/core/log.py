"""Logging helpers shared by every layer."""
from __future__ import annotations

import logging
import sys

_ROOT_LOGGER_NAME = "forgez"
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; library code never attaches handlers itself."""
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING") -> None:
    """Attach a single console handler to the package logger."""
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.WARNING
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if getattr(handler, "_forgez_console", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._forgez_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
