"""Unit tests for ClockDetection and RuntimeClockKind.

Detection is a tri-state result; kind and handle must stay consistent so
every consumer can rely on ``handle is None`` meaning "no clock".
"""

import dataclasses

import pytest

from spanclock.domain.models.clock_detection import ClockDetection, RuntimeClockKind
from tests.helpers import FakePerformance


class TestRuntimeClockKind:
    """Tests for the closed set of runtime clock kinds."""

    def test_has_exactly_three_kinds(self) -> None:
        assert {kind.value for kind in RuntimeClockKind} == {"none", "server", "browser"}


class TestClockDetection:
    """Tests for ClockDetection invariants."""

    def test_unavailable_has_no_handle(self) -> None:
        detection = ClockDetection.unavailable()

        assert detection.kind is RuntimeClockKind.NONE
        assert detection.handle is None
        assert detection.available is False
        assert detection.server_runtime is True

    def test_unavailable_records_browser_runtime(self) -> None:
        detection = ClockDetection.unavailable(server_runtime=False)

        assert detection.server_runtime is False

    def test_detected_handle_is_available(self) -> None:
        handle = FakePerformance(now_ms=1.0)
        detection = ClockDetection(kind=RuntimeClockKind.BROWSER, handle=handle, server_runtime=False)

        assert detection.available is True
        assert detection.handle is handle

    def test_none_kind_rejects_handle(self) -> None:
        with pytest.raises(ValueError, match="cannot carry a handle"):
            ClockDetection(kind=RuntimeClockKind.NONE, handle=FakePerformance())

    @pytest.mark.parametrize("kind", [RuntimeClockKind.SERVER, RuntimeClockKind.BROWSER])
    def test_clock_kind_requires_handle(self, kind: RuntimeClockKind) -> None:
        with pytest.raises(ValueError, match="requires a handle"):
            ClockDetection(kind=kind)

    def test_browser_kind_rejects_server_runtime(self) -> None:
        with pytest.raises(ValueError, match="server_runtime=False"):
            ClockDetection(kind=RuntimeClockKind.BROWSER, handle=FakePerformance())

    def test_server_kind_rejects_browser_runtime(self) -> None:
        with pytest.raises(ValueError, match="server_runtime=True"):
            ClockDetection(
                kind=RuntimeClockKind.SERVER, handle=FakePerformance(), server_runtime=False
            )

    def test_is_immutable(self) -> None:
        detection = ClockDetection.unavailable()

        with pytest.raises(dataclasses.FrozenInstanceError):
            detection.kind = RuntimeClockKind.SERVER  # type: ignore[misc]
