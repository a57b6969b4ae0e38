"""Unit tests for the wall-clock timestamp source.

The wall clock is deliberately not monotonic: backward readings must be
returned unmodified.
"""

import time
from unittest.mock import MagicMock, patch

from freezegun import freeze_time

from spanclock.infrastructure.adapters.clock.wall_clock import (
    WallClockTimestampSource,
    wall_clock_millis,
)


class TestWallClockMillis:
    """Tests for wall_clock_millis."""

    @freeze_time("2023-11-14 22:13:20")
    def test_returns_epoch_milliseconds(self) -> None:
        assert wall_clock_millis() == 1_700_000_000_000.0

    def test_tracks_system_clock(self) -> None:
        assert abs(wall_clock_millis() - time.time() * 1000) < 50


class TestWallClockTimestampSource:
    """Tests for WallClockTimestampSource."""

    @freeze_time("2023-11-14 22:13:20")
    def test_now_seconds_divides_millis(self) -> None:
        assert WallClockTimestampSource().now_seconds() == 1_700_000_000.0

    def test_uses_injected_millis(self) -> None:
        source = WallClockTimestampSource(millis=lambda: 1_600_000_000_500.0)

        assert source.now_seconds() == 1_600_000_000.5

    def test_backward_readings_are_not_corrected(self) -> None:
        readings = iter([1_700_000_000_000.0, 1_699_999_990_000.0])
        source = WallClockTimestampSource(millis=lambda: next(readings))

        first = source.now_seconds()
        second = source.now_seconds()

        assert first == 1_700_000_000.0
        assert second == 1_699_999_990.0
        assert second < first

    def test_backward_system_clock_is_not_corrected(self) -> None:
        fake_time = MagicMock()
        fake_time.time.side_effect = [1_700_000_000.0, 1_699_999_000.0]

        with patch("spanclock.infrastructure.adapters.clock.wall_clock.time", fake_time):
            source = WallClockTimestampSource()
            first = source.now_seconds()
            second = source.now_seconds()

        assert second == first - 1000.0
