from __future__ import annotations

from enum import Enum


class EntryKind(str, Enum):
    EVENT = "event"
    TRIP = "trip"
    TODO = "todo"
