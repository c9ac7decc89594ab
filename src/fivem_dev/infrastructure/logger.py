"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import os
import sys

import structlog


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Configure structlog with console output on stderr."""
    log_level = _resolve_level(level or os.environ.get("LOG_LEVEL", "INFO"))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()


logger: structlog.typing.FilteringBoundLogger = setup_logging()
