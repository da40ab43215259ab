"""Logging setup for the embedport CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from embedport.errors import InvalidArgumentError

LOGGER_NAME = "embedport"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise InvalidArgumentError(f"Unknown log level: {level}")
        level = resolved
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
