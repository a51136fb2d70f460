"""Tracked handles: objects that count their own destruction.

A TrackedHandle is placed inside the structure under test. Each time the
interpreter destroys it (last reference dropped, container slot removed or
overwritten, container collected), the shared counter goes up by exactly
one. The count is read through an Observer created alongside it.

Handles are linear: they cannot be copied or pickled, so "destroyed once"
has a single unambiguous meaning. Sharing one handle between several owners
is fine; destruction happens when the last owner lets go.
"""

from __future__ import annotations

import logging

from dropcount._cell import SharedCounter

logger = logging.getLogger("dropcount.handle")


class TrackedHandle:
    """Increments its shared counter when destroyed."""

    __slots__ = ("_counter", "_armed")

    def __init__(self, counter: SharedCounter | None = None) -> None:
        self._counter = counter if counter is not None else SharedCounter()
        # Cleared by forget(); __del__ skips the increment when False.
        self._armed = True

    @classmethod
    def new_independent(cls) -> TrackedHandle:
        """A handle whose counter is not shared with any Observer."""
        return cls()

    def count(self) -> int:
        """Destruction count read through the handle itself.

        Only a live handle can be asked, so this returns 0 under correct use.
        A non-zero value means the handle was already destroyed by
        drop_in_place() and is being used afterwards.
        """
        return self._counter.load()

    def _destroy(self) -> None:
        """Destruction logic: one increment per call."""
        prev = self._counter.increment()
        if prev >= 1:
            logger.warning("Tracked handle destroyed %d times", prev + 1)
        else:
            logger.debug("Tracked handle destroyed, count now %d", prev + 1)

    def __del__(self) -> None:
        # Attributes are missing if __init__ never ran.
        if getattr(self, "_armed", False):
            self._destroy()

    def __copy__(self):
        raise TypeError("TrackedHandle cannot be copied; share the reference instead")

    def __deepcopy__(self, memo):
        raise TypeError("TrackedHandle cannot be copied; share the reference instead")

    def __reduce_ex__(self, protocol):
        raise TypeError("TrackedHandle cannot be pickled")

    def __repr__(self) -> str:
        return f"TrackedHandle(count={self.count()})"
