from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QComboBox,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from ...config import AppPalette, CalendarSettings
from ...core.datekeys import days_in_month, format_date_key
from ...core.event_store import EventStore
from ...core.grid import WEEKDAY_LABELS, YearMonth, build_month_grid, clamp_day, month_options, shift_month
from ...core.today import TodayCursor
from ...domain import DaySummary, EntryKind
from ...errors import BonfireError
from ...utils.qt import RolloverTimer

logger = logging.getLogger(__name__)

_KIND_LABELS = {EntryKind.EVENT: "Event", EntryKind.TRIP: "Trip", EntryKind.TODO: "Todo"}


def _month_title(month: YearMonth, *, short: bool = False) -> str:
    moment = date(month.year, month.month0 + 1, 1)
    return moment.strftime("%b %Y") if short else moment.strftime("%B %Y")


class DayCell(QFrame):
    clicked = pyqtSignal(int)

    def __init__(self, day: int, colors: AppPalette) -> None:
        super().__init__()
        self.day = day
        self.colors = colors
        self.setObjectName("dayCell")
        self.setFixedHeight(46)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 2, 0, 2)
        layout.setSpacing(2)

        self.number = QLabel(str(day))
        self.number.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.number)

        self.dots = QLabel("")
        self.dots.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.dots.setTextFormat(Qt.TextFormat.RichText)
        layout.addWidget(self.dots)

    def paint_summary(self, summary: DaySummary, *, selected: bool, today: bool) -> None:
        background = "transparent"
        if selected:
            background = self.colors.surface_selected
        elif today:
            background = self.colors.surface_today
        self.setStyleSheet(f"QFrame#dayCell {{ background-color: {background}; border-radius: 14px; }}")
        weight = "bold" if today else "normal"
        self.number.setStyleSheet(f"font-weight: {weight}; background: transparent;")

        spans = []
        for kind in summary.kinds:
            color = self.colors.kind_color(kind)
            if kind is EntryKind.TODO and summary.todo_completed:
                color = self.colors.todo_done_color
            spans.append(f'<span style="color: {color};">&#9679;</span>')
        self.dots.setText("&nbsp;".join(spans))
        self.dots.setStyleSheet("font-size: 7px; background: transparent;")

    def mousePressEvent(self, event) -> None:  # noqa: N802
        self.clicked.emit(self.day)
        super().mousePressEvent(event)


class CalendarPanel(QFrame):
    """Month grid with a details list and an add form for the selected day."""

    date_selected = pyqtSignal(str)

    def __init__(
        self,
        *,
        store: EventStore,
        cursor: TodayCursor,
        settings: CalendarSettings,
        colors: Optional[AppPalette] = None,
    ) -> None:
        super().__init__()
        self.setObjectName("card")
        self.store = store
        self.cursor = cursor
        self.settings = settings
        self.colors = colors or AppPalette()
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._timer = RolloverTimer(cursor, self._on_rollover, interval=settings.rollover_interval, parent=self)

        today = cursor.today
        self._view = YearMonth(today.year, today.month - 1)
        self._selected_day: Optional[int] = today.day
        self._cells: List[DayCell] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        title = QLabel("Calendar")
        title.setObjectName("sectionTitle")
        layout.addWidget(title)

        self.month_strip = QWidget()
        self.month_strip_layout = QHBoxLayout(self.month_strip)
        self.month_strip_layout.setContentsMargins(0, 0, 0, 0)
        strip_scroll = QScrollArea()
        strip_scroll.setWidgetResizable(True)
        strip_scroll.setFixedHeight(48)
        strip_scroll.setWidget(self.month_strip)
        layout.addWidget(strip_scroll)

        header = QHBoxLayout()
        self.prev_button = QPushButton("<")
        self.prev_button.clicked.connect(lambda: self.show_month(shift_month(self._view, -1)))
        self.next_button = QPushButton(">")
        self.next_button.clicked.connect(lambda: self.show_month(shift_month(self._view, 1)))
        self.month_label = QLabel("")
        self.month_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.addWidget(self.prev_button)
        header.addWidget(self.month_label, stretch=1)
        header.addWidget(self.next_button)
        layout.addLayout(header)

        weekdays = QGridLayout()
        for column, label in enumerate(WEEKDAY_LABELS):
            weekday = QLabel(label)
            weekday.setObjectName("muted")
            weekday.setAlignment(Qt.AlignmentFlag.AlignCenter)
            weekdays.addWidget(weekday, 0, column)
        layout.addLayout(weekdays)

        self.grid_host = QWidget()
        self.grid_layout = QGridLayout(self.grid_host)
        self.grid_layout.setSpacing(6)
        layout.addWidget(self.grid_host)

        self.details_title = QLabel("Details")
        self.details_title.setObjectName("sectionTitle")
        layout.addWidget(self.details_title)

        self.details_list = QListWidget()
        self.details_list.itemChanged.connect(self._on_item_changed)
        layout.addWidget(self.details_list, stretch=1)

        self.delete_button = QPushButton("Delete selected")
        self.delete_button.clicked.connect(self._delete_selected)
        layout.addWidget(self.delete_button)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Title...")
        self.title_input.returnPressed.connect(self._add_entry)
        layout.addWidget(self.title_input)

        form = QHBoxLayout()
        self.kind_box = QComboBox()
        for kind in EntryKind:
            self.kind_box.addItem(_KIND_LABELS[kind], kind)
        self.kind_box.currentIndexChanged.connect(lambda _index: self._sync_trip_end())
        form.addWidget(self.kind_box, stretch=1)

        self.trip_end = QSpinBox()
        self.trip_end.setFixedWidth(70)
        form.addWidget(self.trip_end)

        self.add_button = QPushButton("Add")
        self.add_button.clicked.connect(self._add_entry)
        form.addWidget(self.add_button)
        layout.addLayout(form)

        self._build_month_strip()
        self.show_month(self._view)

    # ------------------------------------------------------------------ lifecycle

    def showEvent(self, event) -> None:  # noqa: N802
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self._schedule_refresh)
        self._timer.start()
        self.refresh()
        super().showEvent(event)

    def hideEvent(self, event) -> None:  # noqa: N802
        self._detach()
        super().hideEvent(event)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._detach()
        super().closeEvent(event)

    def _detach(self) -> None:
        self._timer.stop()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _schedule_refresh(self) -> None:
        QTimer.singleShot(0, self.refresh)

    def _on_rollover(self) -> None:
        today = self.cursor.today
        if self.cursor.shows(*self._view):
            self._selected_day = today.day
        self._build_month_strip()
        self.refresh()

    # ------------------------------------------------------------------ navigation

    def _build_month_strip(self) -> None:
        while self.month_strip_layout.count():
            item = self.month_strip_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        today = self.cursor.today
        anchor = YearMonth(today.year, today.month - 1)
        for option in month_options(anchor, self.settings.month_range):
            chip = QPushButton(_month_title(option, short=True))
            chip.setObjectName("monthChip")
            chip.setCheckable(True)
            chip.setChecked(option == self._view)
            chip.clicked.connect(lambda _checked=False, target=option: self.show_month(target))
            self.month_strip_layout.addWidget(chip)

    def show_month(self, month: YearMonth) -> None:
        self._view = month
        last = days_in_month(month.year, month.month0)
        if self._selected_day is None:
            self._selected_day = clamp_day(self.cursor.today.day, *month)
        else:
            self._selected_day = min(self._selected_day, last)
        if self.cursor.shows(*month):
            self._selected_day = self.cursor.today.day
        self.month_label.setText(_month_title(month))
        for index in range(self.month_strip_layout.count()):
            chip = self.month_strip_layout.itemAt(index).widget()
            if isinstance(chip, QPushButton):
                chip.setChecked(chip.text() == _month_title(month, short=True))
        self._rebuild_grid()
        self.refresh()

    def _rebuild_grid(self) -> None:
        while self.grid_layout.count():
            item = self.grid_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._cells = []
        for position, day in enumerate(build_month_grid(*self._view)):
            row, column = divmod(position, 7)
            if day is None:
                self.grid_layout.addWidget(QWidget(), row, column)
                continue
            cell = DayCell(day, self.colors)
            cell.clicked.connect(self.select_day)
            self.grid_layout.addWidget(cell, row, column)
            self._cells.append(cell)

    def select_day(self, day: int) -> None:
        self._selected_day = day
        self.refresh()
        key = self.selected_key()
        if key:
            self.date_selected.emit(key)

    def selected_key(self) -> Optional[str]:
        if self._selected_day is None:
            return None
        return format_date_key(self._view.year, self._view.month0, self._selected_day)

    # ------------------------------------------------------------------ rendering

    def refresh(self) -> None:
        year, month0 = self._view
        for cell in self._cells:
            key = format_date_key(year, month0, cell.day)
            cell.paint_summary(
                self.store.summary_for_date(key),
                selected=cell.day == self._selected_day,
                today=key == self.cursor.key,
            )
        self._populate_details()
        self._sync_trip_end()

    def _populate_details(self) -> None:
        self.details_list.blockSignals(True)
        self.details_list.clear()
        key = self.selected_key()
        entries = self.store.entries_on_date(key) if key else []
        for entry in entries:
            item = QListWidgetItem(f"● {entry.title}")
            item.setForeground(self._color(entry.kind))
            item.setData(Qt.ItemDataRole.UserRole, entry)
            if entry.kind is EntryKind.TODO:
                item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
                item.setCheckState(Qt.CheckState.Checked if entry.completed else Qt.CheckState.Unchecked)
                font = item.font()
                font.setStrikeOut(bool(entry.completed))
                item.setFont(font)
            self.details_list.addItem(item)
        self.details_list.blockSignals(False)

    def _color(self, kind: EntryKind) -> QColor:
        return QColor(self.colors.kind_color(kind))

    def _sync_trip_end(self) -> None:
        is_trip = self.kind_box.currentData() is EntryKind.TRIP
        self.trip_end.setVisible(is_trip)
        if self._selected_day is None:
            return
        last = days_in_month(*self._view)
        current = self.trip_end.value()
        self.trip_end.setRange(self._selected_day, last)
        self.trip_end.setValue(clamp_day(max(current, self._selected_day), *self._view))

    # ------------------------------------------------------------------ actions

    def _on_item_changed(self, item: QListWidgetItem) -> None:
        entry = item.data(Qt.ItemDataRole.UserRole)
        self._run(lambda: self.store.toggle_completed(self.store.index_of(entry)))

    def _delete_selected(self) -> None:
        item = self.details_list.currentItem()
        if item is None:
            return
        entry = item.data(Qt.ItemDataRole.UserRole)
        self._run(lambda: self.store.delete(self.store.index_of(entry)))

    def _add_entry(self) -> None:
        key = self.selected_key()
        if key is None:
            return
        title = self.title_input.text()
        kind = self.kind_box.currentData()

        def _add() -> None:
            if kind is EntryKind.TRIP:
                end_key = format_date_key(self._view.year, self._view.month0, self.trip_end.value())
                self.store.add_range(title, key, end_key)
            else:
                self.store.add_single(kind, title, key)

        if self._run(_add):
            self.title_input.clear()

    def _run(self, action: Callable[[], object]) -> bool:
        try:
            action()
        except (BonfireError, OSError) as exc:
            logger.warning("Calendar action rejected: %s", exc)
            QMessageBox.warning(self, "Calendar", str(exc))
            self.refresh()
            return False
        return True
