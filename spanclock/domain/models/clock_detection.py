"""Runtime clock detection result.

Detection is a tri-state decision made once per process:
no high-resolution clock, a server-runtime clock, or a browser-runtime
clock. The result drives which high-resolution adapter, if any, gets built.

Architecture Note:
- The native handle is duck-typed (anything with a callable ``now()``),
  so it is carried as ``Any`` rather than a domain type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RuntimeClockKind(Enum):
    """Which high-resolution clock the runtime exposes.

    Values:
        NONE: No usable high-resolution clock; wall clock only.
        SERVER: Host-OS interpreter with a performance facility module.
        BROWSER: In-browser interpreter (Pyodide) with a JS ``performance`` object.
    """

    NONE = "none"
    SERVER = "server"
    BROWSER = "browser"


@dataclass(frozen=True)
class ClockDetection:
    """Outcome of probing the runtime for a high-resolution clock.

    Attributes:
        kind: Detected clock kind. NONE when no usable handle was found.
        handle: Native performance handle, or None when unavailable.
        server_runtime: Whether the runtime was classified as server-side.
            Kept separately from ``kind`` so diagnostics can tell a server
            without a clock from a browser without a clock. Must agree
            with ``kind`` whenever a clock was detected.
    """

    kind: RuntimeClockKind
    handle: Any | None = None
    server_runtime: bool = True

    def __post_init__(self) -> None:
        """Keep kind and handle consistent."""
        if self.kind is RuntimeClockKind.NONE and self.handle is not None:
            raise ValueError("ClockDetection with kind NONE cannot carry a handle")
        if self.kind is not RuntimeClockKind.NONE and self.handle is None:
            raise ValueError(f"ClockDetection with kind {self.kind.value} requires a handle")
        if self.kind is RuntimeClockKind.BROWSER and self.server_runtime:
            raise ValueError("ClockDetection with kind browser requires server_runtime=False")
        if self.kind is RuntimeClockKind.SERVER and not self.server_runtime:
            raise ValueError("ClockDetection with kind server requires server_runtime=True")

    @property
    def available(self) -> bool:
        """Whether a high-resolution handle was found."""
        return self.handle is not None

    @classmethod
    def unavailable(cls, *, server_runtime: bool = True) -> ClockDetection:
        """Build the "no high-resolution clock" result."""
        return cls(kind=RuntimeClockKind.NONE, handle=None, server_runtime=server_runtime)
