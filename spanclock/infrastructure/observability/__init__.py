"""Observability infrastructure for rendering library log output.

Usage:
    from spanclock.infrastructure.observability import configure_structlog

    # In the host application, at startup
    configure_structlog(environment="production")
"""

from spanclock.infrastructure.observability.logging import configure_structlog

__all__: list[str] = ["configure_structlog"]
