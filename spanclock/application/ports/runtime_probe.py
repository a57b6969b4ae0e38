"""Runtime Probe Protocol - one-time detection of a high-resolution clock."""

from abc import ABC, abstractmethod

from spanclock.domain.models.clock_detection import ClockDetection


class RuntimeProbeProtocol(ABC):
    """Classifies the runtime and looks for a native performance facility.

    Implementations MUST NOT raise from ``detect()``. Any acquisition
    failure is reported as ``ClockDetection.unavailable()``.
    """

    @abstractmethod
    def detect(self) -> ClockDetection:
        """Probe the runtime.

        Returns:
            Detection result carrying the native handle when one was found.
        """
        ...
