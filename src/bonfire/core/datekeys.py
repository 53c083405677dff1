"""Date key helpers.

A date key is the ``YYYY-MM-DD`` text form of a calendar day. Month and day
are zero padded and the year always has four digits, so plain string
comparison of two keys orders them chronologically. Months passed to these
helpers are zero based (January is ``0``).
"""

from __future__ import annotations

import calendar
import re
from datetime import datetime
from typing import NamedTuple, Optional, Tuple

from ..errors import InvalidDateError

_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


class DayTriple(NamedTuple):
    year: int
    month0: int
    day: int


def _check_month(year: int, month0: int) -> None:
    if not 1 <= year <= 9999:
        raise InvalidDateError(f"Year out of range: {year}")
    if not 0 <= month0 <= 11:
        raise InvalidDateError(f"Month out of range: {month0}")


def days_in_month(year: int, month0: int) -> int:
    _check_month(year, month0)
    return calendar.monthrange(year, month0 + 1)[1]


def first_weekday_of_month(year: int, month0: int) -> int:
    """Weekday of the 1st, counted from Sunday = 0."""

    _check_month(year, month0)
    monday_based = calendar.weekday(year, month0 + 1, 1)
    return (monday_based + 1) % 7


def format_date_key(year: int, month0: int, day: int) -> str:
    last = days_in_month(year, month0)
    if not 1 <= day <= last:
        raise InvalidDateError(f"Day {day} is outside 1..{last} for {year:04d}-{month0 + 1:02d}")
    return f"{year:04d}-{month0 + 1:02d}-{day:02d}"


def parse_date_key(key: str) -> DayTriple:
    match = _KEY_PATTERN.match(key) if isinstance(key, str) else None
    if match is None:
        raise InvalidDateError(f"Not a date key: {key!r}")
    year, month, day = (int(part) for part in match.groups())
    format_date_key(year, month - 1, day)
    return DayTriple(year, month - 1, day)


def is_same_day(a: Tuple[int, int, int], b: Tuple[int, int, int]) -> bool:
    return tuple(a) == tuple(b)


def triple_from_datetime(moment: datetime) -> DayTriple:
    return DayTriple(moment.year, moment.month - 1, moment.day)


def is_today(year: int, month0: int, day: int, now: Optional[datetime] = None) -> bool:
    return is_same_day((year, month0, day), triple_from_datetime(now or datetime.now()))


def today_key(now: Optional[datetime] = None) -> str:
    return format_date_key(*triple_from_datetime(now or datetime.now()))
