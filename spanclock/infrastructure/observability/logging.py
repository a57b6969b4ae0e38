"""Rendering of spanclock log entries for host applications.

spanclock's loggers write to the ``spanclock`` stdlib logger namespace and
stay silent until a handler is attached. ``configure_structlog`` attaches
one handler whose structlog ProcessorFormatter renders entries as JSON
(production) or colored console lines (development).

Log Entry Format (production):
    {
        "event": "timestamp_source_selected",
        "level": "info",
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "service": "TimestampProviderService",
        "component": "clock",
        "source": "performance",
        "runtime": "server",
        ...additional context
    }

Usage:
    from spanclock.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog
from structlog.typing import Processor

from spanclock.application.observability.logging import LIBRARY_LOGGER_NAME

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Handler installed by configure_structlog, replaced on reconfiguration
_handler: logging.Handler | None = None


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(
    environment: str = "production",
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a structlog-rendering handler to the spanclock loggers.

    Calling it again replaces the previously installed handler.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
        stream: Output stream. Defaults to sys.stderr.

    Returns:
        The installed handler.
    """
    global _handler

    foreign_pre_chain: list[Processor] = [
        # Structured fields arrive as LogRecord extras
        structlog.stdlib.ExtraAdder(),
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=foreign_pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(_get_log_level())
    _handler = handler
    return handler
