"""
Application layer - Timestamp source orchestration for spanclock.

This layer contains:
- Port definitions (abstract clock interfaces)
- The composed timestamp provider service

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, bootstrap
"""

from spanclock.application.ports import (
    HighResolutionClockProtocol,
    RuntimeProbeProtocol,
    TimestampSourceProtocol,
)
from spanclock.application.services import TimestampProviderService

__all__: list[str] = [
    "HighResolutionClockProtocol",
    "RuntimeProbeProtocol",
    "TimestampProviderService",
    "TimestampSourceProtocol",
]
