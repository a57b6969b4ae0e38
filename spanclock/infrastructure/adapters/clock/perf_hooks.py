"""Performance facility for host interpreters.

Exposes a module-level ``performance`` object with the same shape as the
browser Performance API: ``now()`` returns milliseconds elapsed on a
monotonic high-resolution counter since this module was loaded, and
``time_origin`` is the wall-clock epoch milliseconds captured at that
same instant. The runtime probe imports this module dynamically.
"""

from __future__ import annotations

import time
from collections.abc import Callable


def select_counter() -> Callable[[], float]:
    """Pick the highest-resolution counter that is monotonic."""
    if time.get_clock_info("perf_counter").monotonic:
        return time.perf_counter
    return time.monotonic


class Performance:
    """Millisecond performance counter anchored to the wall clock.

    Attributes:
        time_origin: Epoch milliseconds at which ``now()`` read zero.
    """

    def __init__(
        self,
        counter: Callable[[], float] | None = None,
        wall_clock: Callable[[], float] = time.time,
    ) -> None:
        self._counter = counter or select_counter()
        self._start = self._counter()
        self.time_origin: float = wall_clock() * 1000

    def now(self) -> float:
        """Milliseconds elapsed since ``time_origin``."""
        return (self._counter() - self._start) * 1000


performance = Performance()
