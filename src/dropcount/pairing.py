"""Constructors for linked TrackedHandle/Observer pairs."""

from __future__ import annotations

import operator

from dropcount._cell import SharedCounter
from dropcount.handle import TrackedHandle
from dropcount.observer import Observer


def create_pair() -> tuple[TrackedHandle, Observer]:
    """Create a handle and an observer sharing one fresh counter.

    Usage:
        handle, observer = create_pair()
        assert observer.count() == 0

        del handle
        assert observer.count() == 1
    """
    counter = SharedCounter()
    return TrackedHandle(counter), Observer(counter)


def create_pairs(n: int) -> tuple[list[TrackedHandle], list[Observer]]:
    """Create n independent pairs as two index-aligned lists.

    handles[i] and observers[i] share a counter; no two indices do.

    Usage:
        handles, observers = create_pairs(5)
        del handles[1:3]
        assert [o.count() for o in observers] == [0, 1, 1, 0, 0]
    """
    if isinstance(n, bool):
        raise TypeError("pair count must be an int, not bool")
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"pair count must be non-negative, got {n}")

    handles: list[TrackedHandle] = []
    observers: list[Observer] = []
    for _ in range(n):
        handle, observer = create_pair()
        handles.append(handle)
        observers.append(observer)
    return handles, observers
