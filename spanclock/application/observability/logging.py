"""Library loggers backed by stdlib logging.

spanclock runs inside host processes, so it never writes output on its
own. Every logger wraps a stdlib logger under the ``spanclock`` namespace,
which carries only a NullHandler. Entries reach a stream only once the
host attaches a handler, either its own or through
``spanclock.infrastructure.observability.configure_structlog``.

Structured fields travel as ``extra`` on the LogRecord, so plain stdlib
handlers see the event name as the message and structlog's
ProcessorFormatter can render the full event.

Usage:
    logger = get_logger_for_service("PlatformRuntimeProbe", logger_name=__name__)
    logger.debug("runtime_clock_detected", runtime="server")
"""

from __future__ import annotations

import logging

import structlog
from structlog.typing import Processor

# Root of the library's stdlib logger namespace
LIBRARY_LOGGER_NAME = "spanclock"

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())

# Drop disabled levels before rendering, then hand fields to stdlib as extra
LIBRARY_PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.render_to_log_kwargs,
]


def get_logger_for_service(
    service_name: str,
    component: str = "clock",
    *,
    logger_name: str = LIBRARY_LOGGER_NAME,
) -> structlog.stdlib.BoundLogger:
    """Get a stdlib-backed logger with service and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "clock").
        logger_name: Stdlib logger name, normally the caller's ``__name__``.

    Returns:
        A BoundLogger with service and component bound.
    """
    return structlog.wrap_logger(
        logging.getLogger(logger_name),
        processors=LIBRARY_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    ).bind(service=service_name, component=component)
