"""Clock detection errors.

Detection failures never reach callers of the public timestamp functions.
The runtime probe raises ClockDetectionError internally and converts it
into the "no high-resolution clock" branch, so the provider falls back to
the wall clock.
"""

from spanclock.domain.exceptions import SpanClockError


class ClockDetectionError(SpanClockError):
    """Raised when a native performance facility cannot be acquired.

    Covers a missing module, an import that raises, a missing
    ``performance`` attribute, or a handle without a callable ``now()``.

    Example:
        raise ClockDetectionError(
            "performance facility 'perf_hooks' has no callable now()"
        )
    """

    def __init__(self, message: str = "", *, runtime: str = "") -> None:
        """Initialize with message and the runtime being probed.

        Args:
            message: Human-readable error description.
            runtime: Runtime kind that was being probed ("server" or "browser").
        """
        super().__init__(message)
        self.runtime = runtime
