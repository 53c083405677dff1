from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow, QSplitter

from ..config import AppPalette
from ..core.today import TodayCursor
from ..services import DashboardContext
from .components.calendar_panel import CalendarPanel
from .components.today_panel import TodayPanel


class MainWindow(QMainWindow):
    def __init__(self, *, context: DashboardContext, colors: AppPalette) -> None:
        super().__init__()
        self.context = context
        settings = context.settings

        self.setWindowTitle(f"{settings.ui.app_name} Dashboard")
        self.resize(1100, 760)

        self.calendar_panel = CalendarPanel(
            store=context.store,
            cursor=TodayCursor(context.clock),
            settings=settings.calendar,
            colors=colors,
        )
        self.today_panel = TodayPanel(
            store=context.store,
            cursor=TodayCursor(context.clock),
            settings=settings.calendar,
            colors=colors,
        )

        splitter = QSplitter()
        splitter.setOrientation(Qt.Orientation.Horizontal)
        splitter.addWidget(self.calendar_panel)
        splitter.addWidget(self.today_panel)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        self.calendar_panel.date_selected.connect(
            lambda key: self.statusBar().showMessage(f"{len(context.store.entries_on_date(key))} entries on {key}", 3000)
        )
