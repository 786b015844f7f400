from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pathlib import Path

_LOGGING_CONFIGURED = False


def setup_logging(
    filename: str | Path | None = None,
    level: str | None = None,
) -> structlog.BoundLogger:
    """Set up structured logging for the svn_fast_export module.

    stdout carries the fast-import stream, so logs never go there. The first
    call configures logging; later calls only reconfigure when given a
    filename or a level.

    Args:
        filename: Optional path to a log file. If None, logs are written to stderr.
        level: Name of the minimum level that is emitted, WARNING when None.

    Returns:
        A structlog logger instance configured for the svn_fast_export module.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if not _LOGGING_CONFIGURED or filename or level:
        numeric_level = logging.getLevelNamesMapping().get((level or "WARNING").upper(), logging.WARNING)
        handlers: list[logging.Handler] = []
        if filename:
            handlers.append(logging.FileHandler(str(filename), encoding="utf-8"))
        else:
            handlers.append(logging.StreamHandler(sys.stderr))

        logging.basicConfig(
            level=numeric_level,
            handlers=handlers,
            format="%(message)s",
            force=True,
        )
        # Loggers bound at import re-read this configuration on every call.
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=False,
        )
        _LOGGING_CONFIGURED = True

    return structlog.get_logger("svn_fast_export")


logger = setup_logging()
