from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QFrame, QLabel, QListWidget, QListWidgetItem, QVBoxLayout

from ...config import AppPalette, CalendarSettings
from ...core.event_store import EventStore
from ...core.today import TodayCursor
from ...utils.qt import RolloverTimer

EMPTY_MESSAGE = "No events scheduled. Add one in the calendar."


class TodayPanel(QFrame):
    """Read-only list of what is happening today."""

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
        self.colors = colors or AppPalette()
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._timer = RolloverTimer(cursor, self.refresh, interval=settings.rollover_interval, parent=self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Today")
        title.setObjectName("sectionTitle")
        layout.addWidget(title)

        self.empty_label = QLabel(EMPTY_MESSAGE)
        self.empty_label.setObjectName("muted")
        layout.addWidget(self.empty_label)

        self.entry_list = QListWidget()
        self.entry_list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self.entry_list, stretch=1)

    def showEvent(self, event) -> None:  # noqa: N802
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(lambda: QTimer.singleShot(0, self.refresh))
        self._timer.start()
        self.refresh()
        super().showEvent(event)

    def hideEvent(self, event) -> None:  # noqa: N802
        self._timer.stop()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        super().hideEvent(event)

    def refresh(self) -> None:
        entries = self.store.entries_on_date(self.cursor.key)
        self.entry_list.clear()
        self.empty_label.setVisible(not entries)
        self.entry_list.setVisible(bool(entries))
        for entry in entries:
            item = QListWidgetItem(f"{entry.kind.value.upper():<5}  {entry.title}")
            item.setForeground(QColor(self.colors.kind_color(entry.kind)))
            item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsSelectable)
            if entry.is_done:
                font = QFont(item.font())
                font.setStrikeOut(True)
                item.setFont(font)
            self.entry_list.addItem(item)
