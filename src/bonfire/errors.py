from __future__ import annotations


class BonfireError(Exception):
    """Base class for calendar errors reported to callers."""


class InvalidInputError(BonfireError, ValueError):
    """Raised when an entry is created with unusable input, such as a blank title."""


class InvalidDateError(BonfireError, ValueError):
    """Raised when a day, month or date key does not name a real calendar day."""


class IndexOutOfRangeError(BonfireError, IndexError):
    """Raised when a positional entry reference is outside the current list."""


class CorruptStateError(BonfireError):
    """Raised when the persisted entry blob cannot be decoded."""
