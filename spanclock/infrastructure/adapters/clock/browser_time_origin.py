"""Best-effort epoch origin of browser performance entries.

Used to align performance entries the browser recorded before the tracing
library initialized. Independent of which timestamp source is bound and
recomputed on every call.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from spanclock.config.timestamp_config import TimestampConfig
from spanclock.infrastructure.adapters.clock.runtime_environment import get_global_object
from spanclock.infrastructure.adapters.clock.wall_clock import wall_clock_millis


def browser_performance_time_origin(
    global_object: Callable[[], Any | None] | None = None,
    *,
    config: TimestampConfig | None = None,
    millis: Callable[[], float] = wall_clock_millis,
) -> float | None:
    """Return the browser's time origin in epoch milliseconds.

    Args:
        global_object: Returns the JS global object, or None. Defaults to
            the configured bridge module.
        config: Where to find the global object and performance facility.
        millis: Wall-clock milliseconds, used as the last fallback.

    Returns:
        ``performance.timeOrigin`` when present and non-zero, else the
        deprecated ``performance.timing.navigationStart`` when set, else the
        current wall-clock milliseconds. None when there is no performance
        facility at all.
    """
    config = config or TimestampConfig()
    if global_object is None:
        target = get_global_object(config.browser_global_module)
    else:
        target = global_object()
    if target is None:
        return None

    performance = getattr(target, config.performance_attribute, None)
    if performance is None:
        return None

    time_origin = getattr(performance, "timeOrigin", None)
    if time_origin:
        return float(time_origin)

    # timing.navigationStart is deprecated in favor of timeOrigin, but Safari
    # lacks timeOrigin, and Web Workers lack timing.
    timing = getattr(performance, "timing", None)
    navigation_start = getattr(timing, "navigationStart", None) if timing is not None else None
    if navigation_start:
        return float(navigation_start)
    return millis()
