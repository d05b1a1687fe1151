"""
Structured logging for the naming package.

Loggers are structlog wrappers around stdlib loggers. The ``naming`` logger
carries a NullHandler, so the package writes nothing until the host
application configures logging, either through ``configure_logging`` or with
its own stdlib handlers.
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from naming.config import Settings

PACKAGE_LOGGER = "naming"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Route structlog through stdlib logging with JSON or console rendering.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON lines when True, human-readable console lines otherwise
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, log_level.upper()))
    
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False),
    ]
    
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from(settings: Settings) -> None:
    """Apply ``NAMING_LOG_LEVEL`` / ``NAMING_LOG_JSON`` from loaded settings."""
    configure_logging(settings.log_level, json_logs=settings.log_json)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Stdlib-backed structlog logger for ``name`` (typically ``__name__``).
    
    Events below the stdlib logger's effective level are dropped, and nothing
    reaches stdout unless a handler has been installed.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
