"""Application services for spanclock."""

from spanclock.application.services.timestamp_provider_service import (
    HighResolutionTimestampSource,
    TimestampProviderService,
)

__all__: list[str] = ["HighResolutionTimestampSource", "TimestampProviderService"]
