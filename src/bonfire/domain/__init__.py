"""Domain models for the dashboard calendar."""

from __future__ import annotations

from .enums import EntryKind
from ..errors import BonfireError, CorruptStateError, IndexOutOfRangeError, InvalidDateError, InvalidInputError
from .models import AbsoluteDate, DaySummary, Entry, LegacyDay, RawDate, classify_raw_date, normalize_record, summarize_day

__all__ = [
    "AbsoluteDate",
    "BonfireError",
    "CorruptStateError",
    "DaySummary",
    "Entry",
    "EntryKind",
    "IndexOutOfRangeError",
    "InvalidDateError",
    "InvalidInputError",
    "LegacyDay",
    "RawDate",
    "classify_raw_date",
    "normalize_record",
    "summarize_day",
]
