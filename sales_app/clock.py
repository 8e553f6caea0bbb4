"""Time source for order numbers, entry ids and default dates."""

from __future__ import annotations

import time
from datetime import date


class Clock:
    """Wall clock with time-based id generation.

    Ids are millisecond timestamps. Two ids requested within the same
    millisecond are bumped so every id handed out by one clock is unique.
    """

    def __init__(self) -> None:
        self._last_id = 0

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def today(self) -> str:
        return date.today().isoformat()

    def next_id(self) -> str:
        candidate = self.now_ms()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)
