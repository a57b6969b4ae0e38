"""Composed timestamp provider.

Chooses, once at construction, between the wall-clock source and a
high-resolution clock, preferring the latter when one was built. The
choice is never revisited for the lifetime of the provider.

Known limitation:
    Performance counters may stop while the machine is asleep, so
    ``now_seconds()`` from the high-resolution path can drift behind the
    wall clock by arbitrary amounts in long-running processes. No drift
    correction is attempted beyond the one-time origin computation.
"""

from __future__ import annotations

from spanclock.application.observability.logging import get_logger_for_service
from spanclock.application.ports.high_resolution_clock import HighResolutionClockProtocol
from spanclock.application.ports.timestamp_source import TimestampSourceProtocol
from spanclock.domain.models.clock_detection import RuntimeClockKind

logger = get_logger_for_service("TimestampProviderService", logger_name=__name__)


class HighResolutionTimestampSource(TimestampSourceProtocol):
    """Timestamp source backed by a HighResolutionClockProtocol.

    The composed value is always ``(origin_ms + elapsed_ms()) / 1000``.
    """

    def __init__(self, clock: HighResolutionClockProtocol) -> None:
        self._clock = clock

    @property
    def clock(self) -> HighResolutionClockProtocol:
        return self._clock

    def now_seconds(self) -> float:
        return (self._clock.origin_ms + self._clock.elapsed_ms()) / 1000


class TimestampProviderService(TimestampSourceProtocol):
    """Public "now in seconds" provider with a fixed backing source.

    Attributes:
        _wall_clock: Source used when no high-resolution clock exists.
        _active: The source bound at construction.
        _runtime_kind: Which runtime clock backs the provider.

    Example:
        >>> provider = TimestampProviderService(WallClockTimestampSource())
        >>> provider.using_performance_api
        False
        >>> provider.now_seconds() > 0
        True
    """

    def __init__(
        self,
        wall_clock: TimestampSourceProtocol,
        high_resolution_clock: HighResolutionClockProtocol | None = None,
        *,
        runtime_kind: RuntimeClockKind = RuntimeClockKind.NONE,
    ) -> None:
        """Bind the active source.

        Args:
            wall_clock: Wall-clock source, used as the fallback.
            high_resolution_clock: Normalized high-resolution clock, if detected.
            runtime_kind: Detected runtime clock kind, for diagnostics.
        """
        self._wall_clock = wall_clock
        self._active: TimestampSourceProtocol
        if high_resolution_clock is not None:
            self._active = HighResolutionTimestampSource(high_resolution_clock)
            self._runtime_kind = runtime_kind
        else:
            self._active = wall_clock
            self._runtime_kind = RuntimeClockKind.NONE

        logger.info(
            "timestamp_source_selected",
            source="performance" if self.using_performance_api else "date",
            runtime=self._runtime_kind.value,
            origin_ms=self.origin_ms,
        )

    @property
    def using_performance_api(self) -> bool:
        """True when timestamps come from a high-resolution clock."""
        return isinstance(self._active, HighResolutionTimestampSource)

    @property
    def runtime_kind(self) -> RuntimeClockKind:
        return self._runtime_kind

    @property
    def active_source(self) -> TimestampSourceProtocol:
        return self._active

    @property
    def wall_clock(self) -> TimestampSourceProtocol:
        return self._wall_clock

    @property
    def origin_ms(self) -> float | None:
        """Epoch-millisecond origin of the high-resolution clock, if bound."""
        if isinstance(self._active, HighResolutionTimestampSource):
            return self._active.clock.origin_ms
        return None

    def now_seconds(self) -> float:
        """Best-available seconds since the UNIX epoch."""
        return self._active.now_seconds()

    def wall_clock_seconds(self) -> float:
        """Wall-clock seconds, regardless of the bound source."""
        return self._wall_clock.now_seconds()
