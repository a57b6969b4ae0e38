"""
Pytest configuration and shared fixtures for spanclock tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layout
- Inject fake handles and probes instead of relying on the host runtime
- Time-dependent tests must use FakePerformance or freezegun
"""

from collections.abc import Iterator

import pytest

from spanclock.bootstrap.timestamps import reset_timestamp_provider
from tests.helpers import FakeGlobalObject, FakePerformance


@pytest.fixture(autouse=True)
def fresh_timestamp_provider() -> Iterator[None]:
    """Give every test its own provider singleton."""
    reset_timestamp_provider()
    yield
    reset_timestamp_provider()


@pytest.fixture
def fake_performance() -> FakePerformance:
    """Browser-style handle reading 1000 ms."""
    return FakePerformance(now_ms=1000.0)


@pytest.fixture
def fake_global_object(fake_performance: FakePerformance) -> FakeGlobalObject:
    """Global object exposing ``fake_performance``."""
    return FakeGlobalObject(fake_performance)


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from spanclock import __version__

    return __version__
