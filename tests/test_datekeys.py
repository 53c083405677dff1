from datetime import date, datetime, timedelta

import pytest

from bonfire.core.datekeys import (
    days_in_month,
    first_weekday_of_month,
    format_date_key,
    is_same_day,
    is_today,
    parse_date_key,
    today_key,
)
from bonfire.errors import InvalidDateError


def test_format_pads_month_and_day():
    assert format_date_key(2026, 0, 5) == "2026-01-05"
    assert format_date_key(2026, 11, 31) == "2026-12-31"
    assert format_date_key(987, 2, 1) == "0987-03-01"


@pytest.mark.parametrize(
    "year, month0, day",
    [(2026, 1, 29), (2026, 3, 31), (2026, 0, 0), (2026, 12, 1), (2026, -1, 1)],
)
def test_format_rejects_days_outside_the_month(year, month0, day):
    with pytest.raises(InvalidDateError):
        format_date_key(year, month0, day)


def test_invalid_date_is_a_value_error():
    with pytest.raises(ValueError):
        format_date_key(2026, 1, 30)


def test_days_in_month_handles_leap_years():
    assert days_in_month(2026, 1) == 28
    assert days_in_month(2024, 1) == 29
    assert days_in_month(1900, 1) == 28
    assert days_in_month(2000, 1) == 29
    assert days_in_month(2026, 3) == 30
    assert days_in_month(2026, 11) == 31


def test_first_weekday_counts_from_sunday():
    # 2026-02-01 is a Sunday, 2026-03-01 a Sunday, 2026-01-01 a Thursday.
    assert first_weekday_of_month(2026, 1) == 0
    assert first_weekday_of_month(2026, 0) == 4
    assert first_weekday_of_month(2025, 5) == 0
    assert first_weekday_of_month(2026, 5) == 1


def test_parse_returns_zero_based_month():
    assert parse_date_key("2026-02-15") == (2026, 1, 15)


@pytest.mark.parametrize("key", ["2026-2-15", "2026-02-30", "26-02-15", "", "2026-02-15T00:00", 20260215])
def test_parse_rejects_malformed_keys(key):
    with pytest.raises(InvalidDateError):
        parse_date_key(key)


def test_round_trip_over_a_leap_year():
    day = date(2024, 1, 1)
    while day.year == 2024:
        key = format_date_key(day.year, day.month - 1, day.day)
        assert parse_date_key(key) == (day.year, day.month - 1, day.day)
        day += timedelta(days=1)


def test_lexicographic_order_matches_chronological_order():
    days = [date(1999, 12, 31), date(2000, 1, 1), date(2000, 1, 10), date(2000, 2, 1), date(2000, 10, 1), date(2010, 1, 1)]
    keys = [format_date_key(d.year, d.month - 1, d.day) for d in days]
    assert keys == sorted(keys)


def test_is_same_day():
    assert is_same_day((2026, 1, 15), (2026, 1, 15))
    assert not is_same_day((2026, 1, 15), (2026, 2, 15))
    assert not is_same_day((2026, 1, 15), (2025, 1, 15))


def test_is_today_and_today_key_use_the_given_clock():
    now = datetime(2026, 10, 19, 23, 59)
    assert is_today(2026, 9, 19, now)
    assert not is_today(2026, 9, 20, now)
    assert today_key(now) == "2026-10-19"
