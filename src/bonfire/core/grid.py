from __future__ import annotations

from typing import List, NamedTuple, Optional

from .datekeys import days_in_month, first_weekday_of_month

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class YearMonth(NamedTuple):
    year: int
    month0: int


def build_month_grid(year: int, month0: int) -> List[Optional[int]]:
    """Leading blanks (``None``) followed by every day number of the month."""

    cells: List[Optional[int]] = [None] * first_weekday_of_month(year, month0)
    cells.extend(range(1, days_in_month(year, month0) + 1))
    return cells


def shift_month(current: YearMonth, offset: int) -> YearMonth:
    year, month0 = divmod(current.year * 12 + current.month0 + offset, 12)
    return YearMonth(year, month0)


def month_options(anchor: YearMonth, span: int = 12) -> List[YearMonth]:
    """Months from ``span`` before ``anchor`` to ``span`` after it, inclusive."""

    return [shift_month(anchor, offset) for offset in range(-span, span + 1)]


def clamp_day(day: int, year: int, month0: int) -> int:
    return max(1, min(day, days_in_month(year, month0)))
