from __future__ import annotations

from datetime import timedelta
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer

from ..core.today import TodayCursor


class RolloverTimer(QObject):
    """Re-samples the clock on an interval and reports day changes.

    Owned by a view: start it when the view is shown and stop it when the
    view goes away, so no tick ever lands on a dead widget.
    """

    def __init__(
        self,
        cursor: TodayCursor,
        on_rollover: Callable[[], None],
        *,
        interval: timedelta = timedelta(seconds=60),
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.cursor = cursor
        self._on_rollover = on_rollover
        self._timer = QTimer(self)
        self._timer.setInterval(int(interval.total_seconds() * 1000))
        self._timer.timeout.connect(self._tick)

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def _tick(self) -> None:
        if self.cursor.advance():
            self._on_rollover()
