"""Domain errors for spanclock.

All exceptions inherit from SpanClockError.
"""

from spanclock.domain.errors.clock import ClockDetectionError

__all__: list[str] = ["ClockDetectionError"]
