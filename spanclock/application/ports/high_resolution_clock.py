"""High Resolution Clock Protocol - normalized native performance handle.

Native handles differ between runtimes (a bundled performance module on
host interpreters, the JavaScript ``performance`` object under Pyodide).
Adapters normalize them into this two-field contract so the provider can
compose ``(origin_ms + elapsed_ms()) / 1000`` without knowing the runtime.
"""

from abc import ABC, abstractmethod


class HighResolutionClockProtocol(ABC):
    """Monotonic millisecond counter plus its epoch origin."""

    @abstractmethod
    def elapsed_ms(self) -> float:
        """Return milliseconds elapsed since the counter's zero point.

        Returns:
            Monotonically non-decreasing float milliseconds.
        """
        ...

    @property
    @abstractmethod
    def origin_ms(self) -> float:
        """Return the counter's zero point as UNIX epoch milliseconds.

        Returns:
            Wall-clock time, in epoch milliseconds, at which
            ``elapsed_ms()`` was effectively zero.
        """
        ...
