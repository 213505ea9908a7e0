"""Clock abstraction for injectable time source."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now_millis(self) -> int: ...


class SystemClock:
    """Default implementation: Unix wall clock in milliseconds."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000
