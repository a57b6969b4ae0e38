"""Wall-clock timestamp source.

This source does not use a monotonic clock. A call to ``now_seconds`` may
return a timestamp earlier than a previously returned value. Monotonicity
is deliberately not emulated: "why does my span have a negative duration"
is easier to debug than "why do my spans have zero duration".
"""

from __future__ import annotations

import time
from collections.abc import Callable

from spanclock.application.ports.timestamp_source import TimestampSourceProtocol


def wall_clock_millis() -> float:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time() * 1000


class WallClockTimestampSource(TimestampSourceProtocol):
    """TimestampSourceProtocol backed by the system wall clock."""

    def __init__(self, millis: Callable[[], float] = wall_clock_millis) -> None:
        self._millis = millis

    def now_seconds(self) -> float:
        return self._millis() / 1000
