from __future__ import annotations

import time
from typing import Callable


class MockBookingIdFactory:
    """Client-side booking ids: <PREFIX>-<epoch millis>, strictly increasing per factory."""

    def __init__(self, prefix: str, clock: Callable[[], float] = time.time) -> None:
        self._prefix = prefix
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        millis = int(self._clock() * 1000)
        if millis <= self._last:
            millis = self._last + 1
        self._last = millis
        return f"{self._prefix}-{millis}"
