"""Core calendar utilities, persistence wiring and the event store.

The store itself lives in :mod:`bonfire.core.event_store`; it is not
re-exported here so the date helpers stay importable from the domain layer.
"""

from .config import APP_NAME, DATA_DIR, STORAGE_KEY, STORE_FILE
from .datekeys import (
    DayTriple,
    days_in_month,
    first_weekday_of_month,
    format_date_key,
    is_same_day,
    is_today,
    parse_date_key,
    today_key,
)
from .grid import WEEKDAY_LABELS, YearMonth, build_month_grid, clamp_day, month_options, shift_month

__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "STORAGE_KEY",
    "STORE_FILE",
    "WEEKDAY_LABELS",
    "DayTriple",
    "YearMonth",
    "build_month_grid",
    "clamp_day",
    "days_in_month",
    "first_weekday_of_month",
    "format_date_key",
    "is_same_day",
    "is_today",
    "month_options",
    "parse_date_key",
    "shift_month",
    "today_key",
]
