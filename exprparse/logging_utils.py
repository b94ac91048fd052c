"""Logging helpers for exprparse."""

import logging
import os
from typing import Optional, Union

LOGGER_NAME = "exprparse"

# Library stays quiet until the application configures logging
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    # unknown names come back as "Level <name>"
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    The level comes from the argument, else EXPRPARSE_LOG_LEVEL, else WARNING.
    Unknown level names fall back to WARNING. Calling this again only
    updates the level.
    """
    global _handler

    if level is None:
        level = os.environ.get("EXPRPARSE_LOG_LEVEL", "WARNING")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        ))
        logger.addHandler(_handler)

    return logger
