"""Structured logging setup shared by the API process and scripts."""

import logging
import sys

import structlog

from member_directory.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog processors and the filtering level from settings."""
    if settings.LOG_FORMAT == "json" or not sys.stdout.isatty():
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.LOG_LEVEL)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging"]
