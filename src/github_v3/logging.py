"""Logging configuration helpers (structlog)."""

from __future__ import annotations

import logging
import os
import sys

import structlog


def configure_structlog() -> None:
    """
    Configure structlog for this library.

    Default behavior:
    - Logs go to stderr (keeps stdout clean for CLI output).
    - Default level is WARNING (override with `GITHUB_V3_LOG_LEVEL`).
    """
    level_name = os.getenv("GITHUB_V3_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelNamesMapping().get(level_name)
    if level is None:
        print(
            f"Invalid GITHUB_V3_LOG_LEVEL {level_name!r}; falling back to WARNING",
            file=sys.__stderr__,
        )
        level = logging.WARNING

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.__stderr__),
        cache_logger_on_first_use=True,
    )
