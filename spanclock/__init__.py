"""
spanclock - Timestamp sources for span and event instrumentation.

Returns seconds since the UNIX epoch, backed by a monotonic high-resolution
clock when the runtime exposes one and by the wall clock otherwise.
"""

from spanclock.bootstrap.timestamps import (
    browser_performance_time_origin,
    date_timestamp_in_seconds,
    timestamp_in_seconds,
    timestamp_with_ms,
    using_performance_api,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "browser_performance_time_origin",
    "date_timestamp_in_seconds",
    "timestamp_in_seconds",
    "timestamp_with_ms",
    "using_performance_api",
]
