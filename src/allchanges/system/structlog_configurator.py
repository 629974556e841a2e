"""Structlog-based logging configuration for the changes aggregator.

Diagnostics go to stderr so that the aggregation summary printed on stdout
stays readable. Lines are rendered by structlog's console renderer without colors.
"""

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

from allchanges.config.models import LoggingConfig


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _configure_processors(config: LoggingConfig) -> list:
    """Configure structlog processors."""
    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(config.extra_fields),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.dev.ConsoleRenderer(colors=False),
    ]
    return processors


def _configure_handlers(config: LoggingConfig) -> None:
    """Route rendered log lines to stderr through the root logger."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)


def configure_structlog(config: LoggingConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The LoggingConfig instance containing logging settings.
    """
    structlog.configure(
        processors=_configure_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.level.upper(), logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _configure_handlers(config)

    logger = structlog.get_logger(__name__)
    logger.debug("Structured logging configured", log_level=config.level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)
