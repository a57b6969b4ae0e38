"""Application ports (abstract interfaces) for spanclock."""

from spanclock.application.ports.high_resolution_clock import HighResolutionClockProtocol
from spanclock.application.ports.runtime_probe import RuntimeProbeProtocol
from spanclock.application.ports.timestamp_source import TimestampSourceProtocol

__all__: list[str] = [
    "HighResolutionClockProtocol",
    "RuntimeProbeProtocol",
    "TimestampSourceProtocol",
]
