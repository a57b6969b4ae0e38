"""Clock adapters: wall clock, runtime probe, and high-resolution clocks."""

from spanclock.infrastructure.adapters.clock.browser_time_origin import (
    browser_performance_time_origin,
)
from spanclock.infrastructure.adapters.clock.high_resolution import (
    BrowserHighResolutionClock,
    ServerHighResolutionClock,
    build_high_resolution_clock,
)
from spanclock.infrastructure.adapters.clock.runtime_environment import (
    dynamic_import,
    get_global_object,
    is_server_env,
)
from spanclock.infrastructure.adapters.clock.runtime_probe import PlatformRuntimeProbe
from spanclock.infrastructure.adapters.clock.wall_clock import (
    WallClockTimestampSource,
    wall_clock_millis,
)

__all__: list[str] = [
    "BrowserHighResolutionClock",
    "PlatformRuntimeProbe",
    "ServerHighResolutionClock",
    "WallClockTimestampSource",
    "browser_performance_time_origin",
    "build_high_resolution_clock",
    "dynamic_import",
    "get_global_object",
    "is_server_env",
    "wall_clock_millis",
]
