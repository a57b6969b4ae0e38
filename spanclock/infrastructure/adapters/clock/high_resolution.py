"""High-resolution clock adapters.

Normalize native performance handles into HighResolutionClockProtocol.

Server handles report a trustworthy origin, which is used as-is.

Browser handles do not: some browsers report ``performance.timeOrigin``
such that ``timeOrigin + now()`` lands arbitrarily far in the past, and
some do not report it at all. The browser adapter therefore anchors the
counter to the wall clock once, at construction, as
``wall_clock_millis() - now()``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from spanclock.application.ports.high_resolution_clock import HighResolutionClockProtocol
from spanclock.domain.models.clock_detection import ClockDetection, RuntimeClockKind
from spanclock.infrastructure.adapters.clock.wall_clock import wall_clock_millis

# Attribute names under which handles report their origin, in lookup order
TIME_ORIGIN_ATTRIBUTES = ("time_origin", "timeOrigin")


def read_time_origin(handle: Any) -> float | None:
    """Return the origin a handle reports, or None when it reports none."""
    for name in TIME_ORIGIN_ATTRIBUTES:
        value = getattr(handle, name, None)
        if value is not None:
            return float(value)
    return None


class _PerformanceClock(HighResolutionClockProtocol):
    def __init__(self, handle: Any, origin_ms: float) -> None:
        self._handle = handle
        self._origin_ms = origin_ms

    def elapsed_ms(self) -> float:
        return float(self._handle.now())

    @property
    def origin_ms(self) -> float:
        return self._origin_ms


class ServerHighResolutionClock(_PerformanceClock):
    """Clock over a server-runtime handle, trusting its reported origin.

    A handle that reports no origin at all is anchored to the wall clock
    the same way the browser adapter does it.
    """

    def __init__(
        self,
        handle: Any,
        millis: Callable[[], float] = wall_clock_millis,
    ) -> None:
        origin = read_time_origin(handle)
        if origin is None:
            origin = millis() - float(handle.now())
        super().__init__(handle, origin)


class BrowserHighResolutionClock(_PerformanceClock):
    """Clock over a browser handle with a wall-clock anchored origin."""

    def __init__(
        self,
        handle: Any,
        millis: Callable[[], float] = wall_clock_millis,
    ) -> None:
        super().__init__(handle, millis() - float(handle.now()))


_CLOCK_FACTORIES: dict[
    RuntimeClockKind, Callable[[Any, Callable[[], float]], HighResolutionClockProtocol]
] = {
    RuntimeClockKind.SERVER: ServerHighResolutionClock,
    RuntimeClockKind.BROWSER: BrowserHighResolutionClock,
}


def build_high_resolution_clock(
    detection: ClockDetection,
    millis: Callable[[], float] = wall_clock_millis,
) -> HighResolutionClockProtocol | None:
    """Build the adapter for a detection result.

    Returns:
        The normalized clock, or None when no handle was detected.
    """
    if detection.handle is None:
        return None
    factory = _CLOCK_FACTORIES[detection.kind]
    return factory(detection.handle, millis)
