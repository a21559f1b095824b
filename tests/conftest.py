"""Pytest configuration for categorycache tests."""

from datetime import timedelta

import pytest

from categorycache import SqliteCategoryStore


class FakeClock:
    """Manually advanced clock used in place of ``time.monotonic``."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, delta: timedelta | float) -> None:
        if isinstance(delta, timedelta):
            delta = delta.total_seconds()
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at an arbitrary time."""
    return FakeClock()


@pytest.fixture
async def sqlite_store():
    """Create an in-memory SQLite category store."""
    store = await SqliteCategoryStore.connect(":memory:")
    yield store
    await store.close()
