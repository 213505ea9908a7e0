"""Monotonic per-process counter used by unique mode."""

from __future__ import annotations

import threading

from short_ids.core.errors import InvalidArgumentError


def _check_start(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"counter value must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidArgumentError(f"counter value must be >= 0, got {value}")
    return value


class ProcessCounter:
    """Lock-guarded fetch-and-increment counter.

    Python integers do not overflow, so the counter never wraps.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = _check_start(start)
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the value after the increment."""
        with self._lock:
            self._value += 1
            return self._value

    def reset(self, value: int = 0) -> None:
        value = _check_start(value)
        with self._lock:
            self._value = value

    @property
    def value(self) -> int:
        return self._value
