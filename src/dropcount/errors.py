"""Exceptions raised by dropcount.

Double destruction and reads through a destroyed handle are not errors here:
they surface as count values for the caller's own assertions. The only
condition the package raises on is a saturated counter.
"""


class DropCountError(Exception):
    """Base class for dropcount errors."""


class CounterOverflowError(DropCountError, OverflowError):
    """A shared counter was asked to increment past MAX_COUNT.

    Reaching the limit takes an astronomical number of destructions of one
    handle, so this signals gross misuse rather than a recoverable state.
    """
