"""dropcount: count destructor calls to test resource management.

Hand-built containers, caches and wrappers can leak the objects they hold or
release them twice. Put a TrackedHandle into the structure, keep its
Observer, and assert on the observer's count.
"""

from importlib.metadata import version as _version

__version__ = _version("dropcount")

from dropcount.errors import DropCountError, CounterOverflowError
from dropcount._cell import MAX_COUNT
from dropcount.observer import Observer
from dropcount.handle import TrackedHandle
from dropcount.pairing import create_pair, create_pairs
from dropcount.manual import drop_in_place, forget

__all__ = [
    "create_pair",
    "create_pairs",
    "TrackedHandle",
    "Observer",
    "drop_in_place",
    "forget",
    "DropCountError",
    "CounterOverflowError",
    "MAX_COUNT",
]
