"""Logging utilities for shell-client."""

from __future__ import annotations

import logging
import sys
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LABEL_SEPARATOR: Final[str] = " ▸ "
_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def configure_logging(level: str = "INFO", fmt: str | None = None) -> None:
    """Configure application logging.

    Args:
        level: Logging level name (e.g., "INFO", "DEBUG").
        fmt: Optional logging format string. Defaults to a standard structured format.
    """

    logging.basicConfig(
        level=_normalize_level(level),
        format=fmt or DEFAULT_LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for the given module or component."""

    return logging.getLogger(name)


def build_logger(label: str, *, show_label: bool = False, level: str = "INFO") -> logging.Logger:
    """Return a logger that writes bare messages to stdout.

    Args:
        label: Logger name, optionally shown before each message.
        show_label: Prefix messages with ``label ▸ `` when true.
        level: Logging level name.
    """

    logger = logging.getLogger(label)
    fmt = "%(message)s"
    if show_label:
        fmt = f"{label}{LABEL_SEPARATOR}{fmt}"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    logger.handlers = [handler]
    logger.setLevel(_normalize_level(level))
    logger.propagate = False
    return logger


def _normalize_level(level: str) -> int:
    normalized = level.strip().upper()
    return _LEVELS.get(normalized, logging.INFO)
