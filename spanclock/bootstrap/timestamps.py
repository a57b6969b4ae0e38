"""Bootstrap wiring for the process-wide timestamp provider.

Detection and origin computation run once, lazily, on first access to the
provider. The detect-and-bind sequence runs under a lock so two threads
cannot compute two different origins.

Public functions:
    date_timestamp_in_seconds: wall-clock seconds, never monotonic
    timestamp_in_seconds: best-available seconds since the epoch
    timestamp_with_ms: old name of timestamp_in_seconds
    using_performance_api: whether a high-resolution clock is bound
    browser_performance_time_origin: epoch origin of browser performance entries
"""

from __future__ import annotations

import threading

from spanclock.application.ports.runtime_probe import RuntimeProbeProtocol
from spanclock.application.services.timestamp_provider_service import (
    TimestampProviderService,
)
from spanclock.config.timestamp_config import TimestampConfig
from spanclock.infrastructure.adapters.clock.browser_time_origin import (
    browser_performance_time_origin as _browser_performance_time_origin,
)
from spanclock.infrastructure.adapters.clock.high_resolution import (
    build_high_resolution_clock,
)
from spanclock.infrastructure.adapters.clock.runtime_probe import PlatformRuntimeProbe
from spanclock.infrastructure.adapters.clock.wall_clock import WallClockTimestampSource

# Thread lock for singleton initialization
_provider_lock = threading.Lock()

_timestamp_provider: TimestampProviderService | None = None

_date_timestamp_source = WallClockTimestampSource()


def build_timestamp_provider(
    config: TimestampConfig | None = None,
    *,
    probe: RuntimeProbeProtocol | None = None,
) -> TimestampProviderService:
    """Probe the runtime and compose a fresh provider.

    Args:
        config: Detection configuration. Defaults to TimestampConfig().
        probe: Runtime probe override. Defaults to PlatformRuntimeProbe.

    Returns:
        A provider bound to the high-resolution clock when one was
        detected, else to the wall clock.
    """
    probe = probe or PlatformRuntimeProbe(config or TimestampConfig())
    detection = probe.detect()
    return TimestampProviderService(
        _date_timestamp_source,
        build_high_resolution_clock(detection),
        runtime_kind=detection.kind,
    )


def get_timestamp_provider() -> TimestampProviderService:
    """Get the process-wide provider, building it on first use (thread-safe).

    Uses double-checked locking for thread-safe lazy initialization.
    """
    global _timestamp_provider
    if _timestamp_provider is None:
        with _provider_lock:
            # Double-check inside lock
            if _timestamp_provider is None:
                _timestamp_provider = build_timestamp_provider()
    return _timestamp_provider


def set_timestamp_provider(provider: TimestampProviderService) -> None:
    """Set custom timestamp provider (testing/override)."""
    global _timestamp_provider
    with _provider_lock:
        _timestamp_provider = provider


def reset_timestamp_provider() -> None:
    """Reset the provider singleton (testing cleanup)."""
    global _timestamp_provider
    with _provider_lock:
        _timestamp_provider = None


def date_timestamp_in_seconds() -> float:
    """Seconds since the UNIX epoch from the wall clock."""
    return _date_timestamp_source.now_seconds()


def timestamp_in_seconds() -> float:
    """Seconds since the UNIX epoch from the best available clock.

    See ``using_performance_api`` to tell which clock is used. Performance
    counters can stop while the machine sleeps, so this can drift behind
    ``date_timestamp_in_seconds`` by arbitrary amounts.
    """
    return get_timestamp_provider().now_seconds()


# Re-exported with an old name for backwards-compatibility.
timestamp_with_ms = timestamp_in_seconds


def using_performance_api() -> bool:
    """True when ``timestamp_in_seconds`` uses a high-resolution clock."""
    return get_timestamp_provider().using_performance_api


def browser_performance_time_origin() -> float | None:
    """Epoch milliseconds at which browser performance measurement began.

    Only meaningful under an in-browser interpreter. Returns None when no
    performance facility exists.
    """
    return _browser_performance_time_origin()


__all__ = [
    "browser_performance_time_origin",
    "build_timestamp_provider",
    "date_timestamp_in_seconds",
    "get_timestamp_provider",
    "reset_timestamp_provider",
    "set_timestamp_provider",
    "timestamp_in_seconds",
    "timestamp_with_ms",
    "using_performance_api",
]
