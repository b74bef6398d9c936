from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "termwrap"


def resolve_level(level: Union[str, int]) -> int:
    """Map a level name ("debug", "INFO") or number to a logging level; unknown names fall back to WARNING."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logger(level: Union[str, int] = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Send termwrap's records to stderr through rich.

    Only the package logger gets a handler, so wrapping inside a host
    application leaves its root logging alone. Calling this again
    replaces the handler instead of stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(existing)
    handler = RichHandler(
        console=console or Console(stderr=True, highlight=False),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or LOGGER_NAME)
