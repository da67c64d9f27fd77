"""Centralized logging configuration for the report engine.

- ``configure_logging(...)`` attaches a single rich console handler to the
  ``ecotrack`` logger. Entrypoints (``main.py``, ``generate_data.py``) call it
  once at startup.
- ``get_logger(name)`` returns a logger and makes sure the ``ecotrack`` logger
  has a ``NullHandler`` when nothing has been configured, so library use stays
  quiet.

Modules never attach their own handlers; they call
``get_logger("ecotrack.<module>")``.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

_PKG_LOGGER_NAME = "ecotrack"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("ECOTRACK_LOG_LEVEL")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def configure_logging(level: int | str | None = None, *, console: Console | None = None) -> None:
    """Configure the ``ecotrack`` logger exactly once.

    ``level`` accepts an int or a level name. When ``None`` the
    ``ECOTRACK_LOG_LEVEL`` environment variable is used, falling back to INFO.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s %(message)s"))

    resolved = _parse_level(level)
    handler.setLevel(resolved)
    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
