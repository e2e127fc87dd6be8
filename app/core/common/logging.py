"""Structured logging setup.

All modules log through the shared ``logger`` using event names and keyword
fields, e.g. ``logger.info("user_created", user_id=1)``. Request scoped fields
are carried in context variables.
"""

import logging
import sys
from typing import Any

import structlog

from app.core.common.config import settings


def configure_logging(level: str = settings.LOG_LEVEL, log_format: str = settings.LOG_FORMAT) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name (e.g. "INFO")
        log_format: "json" for machine readable output, anything else for console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=[*shared_processors, *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def bind_context(**kwargs: Any) -> None:
    """Bind fields to every log line emitted in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all fields bound with ``bind_context``."""
    structlog.contextvars.clear_contextvars()


configure_logging()

logger = structlog.get_logger()
