"""Logging setup for the ``dice-royale`` command."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "dice_royale"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def level_for_verbosity(verbose_count: int) -> int:
    """0 → WARNING, 1 (-v) → INFO, 2+ (-vv) → DEBUG."""
    if verbose_count <= 0:
        return logging.WARNING
    if verbose_count == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    verbose_count: int = 0,
    logger_name: str = PACKAGE_LOGGER,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach one stderr handler to the package logger and set its level.

    Module loggers (``dice_royale.scoreboard``, ``dice_royale.session`` ...)
    inherit from it. Calling again only updates the level; the handler is
    added once per logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level_for_verbosity(verbose_count))

    if not any(getattr(h, "_dice_royale_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream=stream or sys.stderr)
        handler._dice_royale_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)

    return logger
