"""
Domain layer - Pure timekeeping types for spanclock.

This layer contains:
- Detection models (runtime clock kind, detection result)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from spanclock.domain.errors import ClockDetectionError
from spanclock.domain.exceptions import SpanClockError
from spanclock.domain.models import ClockDetection, RuntimeClockKind

__all__: list[str] = [
    "ClockDetection",
    "ClockDetectionError",
    "RuntimeClockKind",
    "SpanClockError",
]
