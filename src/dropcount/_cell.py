"""Shared counter cell: the one piece of mutable state behind a pair.

A SharedCounter is referenced by exactly one TrackedHandle and any number of
Observers. It is freed by ordinary reference counting once the last of them
is gone, regardless of its value.
"""

from __future__ import annotations

import sys
import threading

from dropcount.errors import CounterOverflowError

# Platform word maximum, the largest count a counter may hold.
MAX_COUNT = sys.maxsize


class SharedCounter:
    """Non-decreasing integer with atomic read and increment-by-one."""

    __slots__ = ("_value", "_lock")

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def load(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Add one and return the previous value.

        Raises CounterOverflowError, leaving the value untouched, if the
        counter is already at MAX_COUNT.
        """
        with self._lock:
            prev = self._value
            if prev >= MAX_COUNT:
                raise CounterOverflowError(
                    f"destruction counter saturated at {MAX_COUNT}"
                )
            self._value = prev + 1
            return prev

    def __repr__(self) -> str:
        return f"SharedCounter({self.load()})"
