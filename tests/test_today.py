from datetime import date, datetime

from bonfire.core.today import TodayCursor

from .conftest import FakeClock


def test_cursor_reports_rollover_once():
    clock = FakeClock(datetime(2026, 2, 28, 23, 59))
    cursor = TodayCursor(clock)
    assert cursor.key == "2026-02-28"
    assert not cursor.advance()

    clock.moment = datetime(2026, 3, 1, 0, 0, 30)
    assert cursor.advance()
    assert cursor.today == date(2026, 3, 1)
    assert cursor.key == "2026-03-01"
    assert not cursor.advance()


def test_cursor_knows_which_month_it_is_in():
    cursor = TodayCursor(FakeClock(datetime(2026, 12, 31, 12, 0)))
    assert cursor.shows(2026, 11)
    assert not cursor.shows(2027, 0)
