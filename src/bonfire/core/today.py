from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional

from .datekeys import format_date_key

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class TodayCursor:
    """Tracks the wall-clock day so views can notice midnight passing."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or datetime.now
        self._today: date = self._clock().date()

    @property
    def today(self) -> date:
        return self._today

    @property
    def key(self) -> str:
        return format_date_key(self._today.year, self._today.month - 1, self._today.day)

    def advance(self) -> bool:
        current = self._clock().date()
        if current == self._today:
            return False
        logger.info("Day rolled over from %s to %s", self._today.isoformat(), current.isoformat())
        self._today = current
        return True

    def shows(self, year: int, month0: int) -> bool:
        """Whether the month ``(year, month0)`` contains today."""

        return self._today.year == year and self._today.month - 1 == month0
