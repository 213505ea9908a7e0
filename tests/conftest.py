"""Shared test fixtures."""

from __future__ import annotations

import pytest

from short_ids.generator import reset_counter


class FixedClock:
    """Clock that returns a fixed Unix timestamp in milliseconds."""

    def __init__(self, millis: int = 1_700_000_000_000):
        self._millis = millis

    def now_millis(self) -> int:
        return self._millis


class SequenceRandomSource:
    """Random source that replays a fixed sequence of integers."""

    def __init__(self, values: list[int] | None = None):
        self._values = values or [0]
        self._index = 0
        self.draws = 0

    def randbelow(self, upper: int) -> int:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        self.draws += 1
        return value % upper


@pytest.fixture
def fixed_clock():
    return FixedClock()


@pytest.fixture
def sequence_source():
    return SequenceRandomSource(list(range(62)))


@pytest.fixture
def fresh_default_counter():
    reset_counter(0)
    yield
    reset_counter(0)
