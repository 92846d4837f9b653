"""In-memory click counter shared by all requests."""

from __future__ import annotations

import threading


class CounterState:
    """A single non-negative integer that only ever goes up."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def increment(self) -> None:
        with self._lock:
            self._count += 1

    def value(self) -> int:
        with self._lock:
            return self._count
