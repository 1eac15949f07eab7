"""Shared test fixtures."""

import itertools
from datetime import UTC, datetime, timedelta

import pytest

from src.storage.memory import MemoryStorage


class FakeClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage(clock: FakeClock) -> MemoryStorage:
    """A MemoryStorage with sequential IDs and a ticking clock."""
    counter = itertools.count(1)
    return MemoryStorage(id_factory=lambda: f"id-{next(counter)}", clock=clock)
