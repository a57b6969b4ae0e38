"""Timestamp source detection configuration.

This module names the places the runtime probe looks for a native
performance facility. Configuration is constructor-level only; the clock
core reads no environment variables.

Defaults:
- server_performance_module: the bundled ``perf_hooks`` facility
- browser_global_module: ``js``, the Pyodide bridge to ``globalThis``
- performance_attribute: ``performance``, on both the module and the global
"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Server Runtime
# =============================================================================

# Module imported dynamically on host interpreters
DEFAULT_SERVER_PERFORMANCE_MODULE = "spanclock.infrastructure.adapters.clock.perf_hooks"

# =============================================================================
# Browser Runtime
# =============================================================================

# Pyodide exposes the JavaScript global object as the ``js`` module
DEFAULT_BROWSER_GLOBAL_MODULE = "js"

# Attribute holding the performance facility, on both runtimes
DEFAULT_PERFORMANCE_ATTRIBUTE = "performance"


@dataclass(frozen=True)
class TimestampConfig:
    """Where the runtime probe acquires a high-resolution clock.

    Attributes:
        server_performance_module: Dotted module path imported on server
            runtimes. Its ``performance_attribute`` must expose ``now()``.
        browser_global_module: Module standing in for the JS global object
            on browser runtimes.
        performance_attribute: Attribute name of the performance facility.
    """

    server_performance_module: str = DEFAULT_SERVER_PERFORMANCE_MODULE
    browser_global_module: str = DEFAULT_BROWSER_GLOBAL_MODULE
    performance_attribute: str = DEFAULT_PERFORMANCE_ATTRIBUTE

    def __post_init__(self) -> None:
        """Validate configuration values."""
        for name in (
            "server_performance_module",
            "browser_global_module",
            "performance_attribute",
        ):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")
