"""Logging configuration using structlog."""

import logging
import sys
from typing import Optional

import structlog

from config.settings import settings


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structured logging for the application.

    Events are rendered by structlog and emitted through the standard logging
    handler on stderr; stdout is reserved for the interactive session.
    """

    # Set log level
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    log_format = fmt or settings.log_format

    # Configure processors based on format
    if log_format == "json":
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # structlog renders the whole line, standard logging only routes it
    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance with the given name.

    The logger wraps the standard library logger of the same name, so before
    ``setup_logging()`` runs only warnings and above are emitted, on stderr.
    """
    return structlog.wrap_logger(logging.getLogger(name))
