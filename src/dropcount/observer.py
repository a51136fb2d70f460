"""Observers: read-only views of a tracked handle's destruction count.

An Observer can be duplicated freely; every duplicate reads the same counter.
Creating or dropping observers never changes the count.
"""

from __future__ import annotations

from dropcount._cell import SharedCounter


class Observer:
    """Reports how many times the paired TrackedHandle has been destroyed.

    The count should be 0 while the handle is alive and 1 once it is gone.
    Anything else points to a resource-management bug in the structure that
    held the handle.
    """

    __slots__ = ("_counter",)

    def __init__(self, counter: SharedCounter | None = None) -> None:
        # No counter: a standalone observer that nothing will ever increment.
        self._counter = counter if counter is not None else SharedCounter()

    def count(self) -> int:
        """Destruction count. Safe to call at any time."""
        return self._counter.load()

    def clone(self) -> Observer:
        """Another observer over the same counter."""
        return Observer(self._counter)

    def __copy__(self) -> Observer:
        return self.clone()

    def __deepcopy__(self, memo) -> Observer:
        # A deep copy still watches the same handle.
        return self.clone()

    def __repr__(self) -> str:
        return f"Observer(count={self.count()})"
