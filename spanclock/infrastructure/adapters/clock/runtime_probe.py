"""Platform runtime probe.

Classifies the runtime, then looks for the kind-appropriate performance
facility:

- Server: dynamically import the configured performance module and read
  its performance object.
- Browser: read the performance object from the JavaScript global object.

Detection failures never propagate. They are raised internally as
ClockDetectionError and reported as ``ClockDetection.unavailable()``, so the
provider silently falls back to the wall clock.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from types import ModuleType
from typing import Any

from spanclock.application.observability.logging import get_logger_for_service
from spanclock.application.ports.runtime_probe import RuntimeProbeProtocol
from spanclock.config.timestamp_config import TimestampConfig
from spanclock.domain.errors.clock import ClockDetectionError
from spanclock.domain.models.clock_detection import ClockDetection, RuntimeClockKind
from spanclock.infrastructure.adapters.clock.runtime_environment import (
    dynamic_import,
    get_global_object,
    is_server_env,
)

logger = get_logger_for_service("PlatformRuntimeProbe", logger_name=__name__)


def _require_now(performance: Any, runtime: str) -> None:
    """Check that ``performance.now()`` exists and reads as a number.

    Raises:
        ClockDetectionError: Whatever goes wrong, including a handle whose
            attribute access or ``now()`` call raises.
    """
    try:
        now = getattr(performance, "now", None)
        if not callable(now):
            raise ClockDetectionError(
                f"{runtime} performance facility has no callable now()",
                runtime=runtime,
            )
        float(now())
    except ClockDetectionError:
        raise
    except Exception as exc:
        raise ClockDetectionError(
            f"{runtime} performance facility now() is unusable: {exc!r}",
            runtime=runtime,
        ) from exc


class PlatformRuntimeProbe(RuntimeProbeProtocol):
    """RuntimeProbeProtocol for host interpreters and Pyodide.

    Every collaborator is injectable so tests can simulate either runtime:

        probe = PlatformRuntimeProbe(
            server_env=lambda: False,
            global_object=lambda: FakeGlobalObject(FakePerformance(now_ms=1000.0)),
        )
        detection = probe.detect()
        assert detection.kind is RuntimeClockKind.BROWSER
    """

    def __init__(
        self,
        config: TimestampConfig | None = None,
        *,
        server_env: Callable[[], bool] = is_server_env,
        importer: Callable[[str], ModuleType] = dynamic_import,
        global_object: Callable[[], Any | None] | None = None,
    ) -> None:
        """Initialize the probe.

        Args:
            config: Where to look for performance facilities.
            server_env: Runtime classifier.
            importer: Dynamic module importer used on server runtimes.
            global_object: Returns the JS global object, or None.
        """
        self._config = config or TimestampConfig()
        self._server_env = server_env
        self._importer = importer
        self._global_object = global_object or partial(
            get_global_object, self._config.browser_global_module
        )

    def detect(self) -> ClockDetection:
        server_runtime = self._server_env()
        try:
            if server_runtime:
                kind = RuntimeClockKind.SERVER
                handle = self._acquire_server_performance()
            else:
                kind = RuntimeClockKind.BROWSER
                handle = self._acquire_browser_performance()
        except ClockDetectionError as exc:
            logger.debug(
                "performance_api_unavailable",
                runtime=exc.runtime,
                reason=str(exc),
            )
            return ClockDetection.unavailable(server_runtime=server_runtime)

        logger.debug("runtime_clock_detected", runtime=kind.value)
        return ClockDetection(kind=kind, handle=handle, server_runtime=server_runtime)

    def _acquire_server_performance(self) -> Any:
        module_name = self._config.server_performance_module
        try:
            module = self._importer(module_name)
            performance = getattr(module, self._config.performance_attribute)
        except Exception as exc:
            raise ClockDetectionError(
                f"cannot acquire performance facility from {module_name!r}: {exc!r}",
                runtime=RuntimeClockKind.SERVER.value,
            ) from exc
        _require_now(performance, RuntimeClockKind.SERVER.value)
        return performance

    def _acquire_browser_performance(self) -> Any:
        try:
            global_object = self._global_object()
            performance = (
                getattr(global_object, self._config.performance_attribute, None)
                if global_object is not None
                else None
            )
        except Exception as exc:
            raise ClockDetectionError(
                f"cannot read performance from global object: {exc!r}",
                runtime=RuntimeClockKind.BROWSER.value,
            ) from exc
        if performance is None:
            raise ClockDetectionError(
                "global object has no performance facility",
                runtime=RuntimeClockKind.BROWSER.value,
            )
        _require_now(performance, RuntimeClockKind.BROWSER.value)
        return performance
