"""
Infrastructure layer - Runtime clock adapters for spanclock.

This layer contains:
- Wall-clock source (time.time)
- Runtime classification and performance facility probing
- High-resolution clock adapters (server, browser)
- Structured logging configuration

IMPORT RULES:
- CAN import from: domain, application, config
- Implements ports defined in application layer
"""

from spanclock.infrastructure.adapters.clock import (
    PlatformRuntimeProbe,
    WallClockTimestampSource,
    build_high_resolution_clock,
)

__all__: list[str] = [
    "PlatformRuntimeProbe",
    "WallClockTimestampSource",
    "build_high_resolution_clock",
]
