"""Configuration module for spanclock."""

from spanclock.config.timestamp_config import (
    DEFAULT_BROWSER_GLOBAL_MODULE,
    DEFAULT_PERFORMANCE_ATTRIBUTE,
    DEFAULT_SERVER_PERFORMANCE_MODULE,
    TimestampConfig,
)

__all__ = [
    "DEFAULT_BROWSER_GLOBAL_MODULE",
    "DEFAULT_PERFORMANCE_ATTRIBUTE",
    "DEFAULT_SERVER_PERFORMANCE_MODULE",
    "TimestampConfig",
]
