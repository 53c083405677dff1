import os
from datetime import datetime, timedelta

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from bonfire.config import CalendarSettings  # noqa: E402
from bonfire.core.today import TodayCursor  # noqa: E402
from bonfire.domain import EntryKind  # noqa: E402
from bonfire.ui.components.calendar_panel import CalendarPanel  # noqa: E402
from bonfire.ui.components.today_panel import TodayPanel  # noqa: E402
from bonfire.utils.qt import RolloverTimer  # noqa: E402

from .conftest import FakeClock  # noqa: E402

SETTINGS = CalendarSettings(month_range=2, rollover_interval=timedelta(seconds=60))


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def panels(qapp, store, clock):
    calendar = CalendarPanel(store=store, cursor=TodayCursor(clock), settings=SETTINGS)
    today = TodayPanel(store=store, cursor=TodayCursor(clock), settings=SETTINGS)
    yield calendar, today
    for panel in (calendar, today):
        panel.close()
        panel.deleteLater()
    qapp.processEvents()


def test_panels_subscribe_and_start_timers_on_show(panels, store):
    calendar, today = panels
    calendar.show()
    today.show()
    assert store.notifier.listener_count == 2
    assert calendar._timer.active
    assert today._timer.active


def test_adding_from_calendar_refreshes_today_view(qapp, panels, store):
    calendar, today = panels
    calendar.show()
    today.show()
    assert today.entry_list.count() == 0
    assert not today.empty_label.isHidden()

    calendar.title_input.setText("Standup")
    calendar.kind_box.setCurrentIndex(calendar.kind_box.findData(EntryKind.EVENT))
    calendar.add_button.click()
    qapp.processEvents()

    assert [entry.title for entry in store.entries_on_date("2026-02-10")] == ["Standup"]
    assert today.entry_list.count() == 1
    assert today.empty_label.isHidden()
    assert calendar.details_list.count() == 1


def test_hiding_panels_releases_listeners_and_timers(panels, store):
    calendar, today = panels
    calendar.show()
    today.show()
    calendar.hide()
    today.hide()
    assert store.notifier.listener_count == 0
    assert not calendar._timer.active
    assert not today._timer.active


def test_today_view_catches_up_on_show(qapp, panels, store):
    _calendar, today = panels
    store.add_single(EntryKind.TODO, "Water plants", "2026-02-10")
    today.show()
    assert today.entry_list.count() == 1


def test_rollover_timer_reports_day_change(qapp):
    clock = FakeClock(datetime(2026, 2, 28, 23, 59))
    rolled = []
    timer = RolloverTimer(TodayCursor(clock), lambda: rolled.append(1), interval=timedelta(seconds=1))
    timer.start()
    assert timer.active
    timer._tick()
    assert rolled == []

    clock.moment = datetime(2026, 3, 1, 0, 0)
    timer._tick()
    assert rolled == [1]
    timer.stop()
    assert not timer.active
