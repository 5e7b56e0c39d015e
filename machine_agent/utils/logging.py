"""structlog configuration for the operator-facing log stream (stderr)."""

from __future__ import annotations

import logging
import sys

import structlog

from machine_agent.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure structlog to render key/value events on stderr."""
    name = (level or settings.agent_log_level).upper()
    numeric = getattr(logging, name, logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)
