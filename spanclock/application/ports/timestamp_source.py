"""Timestamp Source Protocol - the "now in seconds" contract.

Every span and event timestamp in the tracing library comes from an
implementation of this port. Two implementations exist:

1. Wall clock: ``time.time()`` based, always available, not monotonic.
2. High resolution: a monotonic counter anchored to an epoch origin.

Exactly one of them is bound to the public provider per process.
"""

from abc import ABC, abstractmethod


class TimestampSourceProtocol(ABC):
    """Abstract source of the current time in seconds since the UNIX epoch.

    Example usage:
        class Span:
            def __init__(self, source: TimestampSourceProtocol) -> None:
                self.start_timestamp = source.now_seconds()
    """

    @abstractmethod
    def now_seconds(self) -> float:
        """Return the current time as seconds since the UNIX epoch.

        Returns:
            Non-negative float seconds, sub-second precision.

        Note:
            Implementations must never raise. Monotonicity depends on the
            implementation; the wall-clock source may move backward.
        """
        ...
