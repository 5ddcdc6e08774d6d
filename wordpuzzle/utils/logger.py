"""Logging utilities for the puzzle player."""

from __future__ import annotations

import logging
from typing import Optional


_HANDLER: Optional[logging.Handler] = None


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging with a compact formatter.

    Interaction events are frequent and mostly ignored at INFO; run with
    ``DEBUG`` to trace every suppressed event. Only the handler installed by
    a previous call is replaced; handlers added by an embedding application
    stay attached.
    """

    global _HANDLER

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
    root.addHandler(handler)
    root.setLevel(level)
    _HANDLER = handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordpuzzle")
