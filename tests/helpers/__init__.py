"""Test helpers for spanclock tests.

Helpers:
    FakePerformance: Controllable performance handle for deterministic tests
    FakeGlobalObject: Stand-in for the JavaScript global object
    FakeRuntimeProbe: Probe returning a preset detection result

Usage:
    from tests.helpers import FakePerformance
"""

from tests.helpers.fake_performance import (
    FakeGlobalObject,
    FakePerformance,
    FakeRuntimeProbe,
    FakeTiming,
)

__all__ = ["FakeGlobalObject", "FakePerformance", "FakeRuntimeProbe", "FakeTiming"]
