"""Domain models for spanclock."""

from spanclock.domain.models.clock_detection import ClockDetection, RuntimeClockKind

__all__: list[str] = ["ClockDetection", "RuntimeClockKind"]
