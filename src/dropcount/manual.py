"""Manual destruction controls for reproducing lifetime bugs.

These bypass the interpreter's normal lifetime rules on purpose. They exist
so a test can stage the misuse it wants the structure under test to avoid,
for example running a handle's destruction logic twice.

Usage:
    handle, observer = create_pair()
    drop_in_place(handle)       # destroyed once, object still reachable
    assert observer.count() == 1
    del handle                  # the interpreter destroys it again
    assert observer.count() == 2
"""

from __future__ import annotations

import logging

from dropcount.handle import TrackedHandle

logger = logging.getLogger("dropcount.manual")


def drop_in_place(handle: TrackedHandle) -> None:
    """Run the handle's destruction logic now.

    Increments on every call, including for forgotten handles. The object
    stays reachable and will be destroyed again by the interpreter unless
    forget() is called on it.
    """
    logger.debug("Running destruction of %r in place", handle)
    handle._destroy()


def forget(handle: TrackedHandle) -> None:
    """Disarm automatic destruction without running it. Idempotent."""
    if handle._armed:
        logger.debug("Forgetting %r", handle)
    handle._armed = False
