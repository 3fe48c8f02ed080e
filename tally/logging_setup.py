"""Logging configuration for tally.

Library modules only call ``get_logger(__name__)``. The CLI calls
``configure_logging`` once at startup, which attaches a single rich handler
to the ``tally`` package logger.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

_PKG_LOGGER_NAME = "tally"
_configured = False


def parse_level(level: int | str | None) -> int:
    """Resolve a logging level from an int, a level name, or TALLY_LOG_LEVEL.

    Falls back to WARNING so that normal CLI output stays clean.
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str) and level.strip():
        value = level.strip().upper()
        if value.isdigit():
            return int(value)
        numeric = getattr(logging, value, None)
        if isinstance(numeric, int):
            return numeric
    env_val = os.environ.get("TALLY_LOG_LEVEL")
    if env_val and env_val != level:
        return parse_level(env_val)
    return logging.WARNING


def configure_logging(level: int | str | None = None) -> None:
    """Attach a RichHandler writing to stderr to the package logger, once."""
    global _configured
    if _configured:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    resolved = parse_level(level)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _configured and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
