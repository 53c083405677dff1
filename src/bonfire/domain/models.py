from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ..core.datekeys import days_in_month, format_date_key, parse_date_key
from .enums import EntryKind
from ..errors import InvalidDateError, InvalidInputError


@dataclass(frozen=True, slots=True)
class LegacyDay:
    """Bare day-of-month written before entries carried a year and month."""

    day: int

    def resolve(self, year: int, month0: int) -> str:
        if self.day < 1:
            raise InvalidDateError(f"Legacy day must be positive, got {self.day}")
        return format_date_key(year, month0, min(self.day, days_in_month(year, month0)))


@dataclass(frozen=True, slots=True)
class AbsoluteDate:
    key: str

    def resolve(self, year: int, month0: int) -> str:
        return self.key


RawDate = Union[LegacyDay, AbsoluteDate]

_DATE_FIELDS = ("date", "start", "end")


def classify_raw_date(value: Any) -> RawDate:
    """Tell a legacy day number apart from a date key by its type."""

    if isinstance(value, bool):
        raise InvalidDateError(f"Unsupported date value: {value!r}")
    if isinstance(value, int):
        return LegacyDay(value)
    if isinstance(value, str):
        return AbsoluteDate(value)
    raise InvalidDateError(f"Unsupported date value: {value!r}")


def normalize_record(record: Dict[str, Any], fallback: Tuple[int, int]) -> Tuple[Dict[str, Any], bool]:
    """Return ``record`` with every legacy day resolved against ``fallback``.

    ``fallback`` is a ``(year, month0)`` pair, normally the month shown when
    the store was loaded. The second item of the result tells whether
    anything was migrated; running the function on its own output is a no-op.
    """

    normalized = dict(record)
    migrated = False
    year, month0 = fallback
    for name in _DATE_FIELDS:
        if normalized.get(name) is None:
            continue
        raw = classify_raw_date(normalized[name])
        if isinstance(raw, LegacyDay):
            normalized[name] = raw.resolve(year, month0)
            migrated = True
    return normalized, migrated


def _require_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise InvalidInputError("Entry title must not be empty.")
    return title


def _require_key(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidDateError(f"Expected a date key, got {value!r}")
    parse_date_key(value)
    return value


@dataclass(slots=True)
class Entry:
    kind: EntryKind
    title: str
    date: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    completed: Optional[bool] = None

    @classmethod
    def event(cls, title: str, date: str) -> "Entry":
        return cls(kind=EntryKind.EVENT, title=_require_title(title), date=_require_key(date))

    @classmethod
    def todo(cls, title: str, date: str, *, completed: bool = False) -> "Entry":
        return cls(kind=EntryKind.TODO, title=_require_title(title), date=_require_key(date), completed=completed)

    @classmethod
    def trip(cls, title: str, start: str, end: str) -> "Entry":
        return cls(kind=EntryKind.TRIP, title=_require_title(title), start=_require_key(start), end=_require_key(end))

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Entry":
        try:
            kind = EntryKind(record.get("type", EntryKind.EVENT.value))
        except ValueError as exc:
            raise InvalidInputError(f"Unknown entry type: {record.get('type')!r}") from exc
        title = record.get("title")
        if kind is EntryKind.TRIP:
            return cls.trip(title, record.get("start"), record.get("end"))
        if kind is EntryKind.TODO:
            completed = record.get("completed")
            if completed is None:
                completed = False
            elif not isinstance(completed, bool):
                raise InvalidInputError(f"Todo completed flag must be a boolean, got {completed!r}")
            return cls.todo(title, record.get("date"), completed=completed)
        return cls.event(title, record.get("date"))

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"type": self.kind.value, "title": self.title}
        if self.kind is EntryKind.TRIP:
            record["start"] = self.start
            record["end"] = self.end
        else:
            record["date"] = self.date
        if self.kind is EntryKind.TODO:
            record["completed"] = bool(self.completed)
        return record

    @property
    def is_done(self) -> bool:
        return self.kind is EntryKind.TODO and bool(self.completed)

    def occurs_on(self, date_key: str) -> bool:
        if self.kind is EntryKind.TRIP:
            return self.start is not None and self.end is not None and self.start <= date_key <= self.end
        return self.date == date_key


@dataclass(frozen=True, slots=True)
class DaySummary:
    """Per-day indicator state: one marker per kind present."""

    kinds: Tuple[EntryKind, ...] = field(default_factory=tuple)
    todo_completed: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.kinds


def summarize_day(entries: Iterable[Entry]) -> DaySummary:
    present = set()
    todos = []
    for entry in entries:
        present.add(entry.kind)
        if entry.kind is EntryKind.TODO:
            todos.append(entry)
    kinds = tuple(kind for kind in EntryKind if kind in present)
    return DaySummary(kinds=kinds, todo_completed=bool(todos) and all(todo.completed for todo in todos))
