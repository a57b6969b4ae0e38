"""Application-level observability utilities."""

from spanclock.application.observability.logging import (
    LIBRARY_LOGGER_NAME,
    get_logger_for_service,
)

__all__ = ["LIBRARY_LOGGER_NAME", "get_logger_for_service"]
