from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

import orjson

from ..data.backends import KeyValueBackend
from ..domain.enums import EntryKind
from ..domain.models import DaySummary, Entry, normalize_record, summarize_day
from ..errors import BonfireError, CorruptStateError, IndexOutOfRangeError, InvalidInputError
from .config import STORAGE_KEY
from .datekeys import parse_date_key
from .notifier import ChangeNotifier, Listener
from .today import Clock

logger = logging.getLogger(__name__)


def decode_entries(raw: str) -> List[Dict[str, Any]]:
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise CorruptStateError(f"Persisted entries are not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise CorruptStateError(f"Persisted entries must be a list, got {type(payload).__name__}")
    return payload


def encode_entries(entries: List[Entry]) -> str:
    return orjson.dumps([entry.to_record() for entry in entries]).decode("utf-8")


class EventStore:
    """Owns the dashboard's calendar entries and is their only writer.

    Entries keep insertion order, which is also display order. ``toggle_completed``
    and ``delete`` take positional indexes; an index is only meaningful inside
    the callback that computed it, since any add or delete shifts later entries.
    Every mutation ends with :meth:`save`, which writes the whole list and then
    notifies subscribers.
    """

    def __init__(
        self,
        backend: KeyValueBackend,
        *,
        key: str = STORAGE_KEY,
        notifier: Optional[ChangeNotifier] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._backend = backend
        self._key = key
        self.notifier = notifier or ChangeNotifier()
        self._clock: Clock = clock or datetime.now
        self._entries: List[Entry] = []

    # ------------------------------------------------------------------ persistence

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> None:
        raw = self._backend.get(self._key)
        if not raw:
            self._entries = []
            return
        try:
            records = decode_entries(raw)
        except CorruptStateError as exc:
            logger.warning("Discarding unreadable calendar state: %s", exc)
            self._entries = []
            return

        now = self._clock()
        fallback = (now.year, now.month - 1)
        entries: List[Entry] = []
        migrated_count = 0
        for position, record in enumerate(records):
            if not isinstance(record, dict):
                logger.warning("Skipping calendar record %d: expected an object, got %r", position, record)
                continue
            try:
                normalized, migrated = normalize_record(record, fallback)
                entries.append(Entry.from_record(normalized))
            except BonfireError as exc:
                logger.warning("Skipping calendar record %d: %s", position, exc)
                continue
            migrated_count += int(migrated)

        self._entries = entries
        logger.debug("Loaded %d calendar entries", len(entries))
        if migrated_count:
            logger.info(
                "Migrated %d legacy entries to %04d-%02d date keys",
                migrated_count,
                fallback[0],
                fallback[1] + 1,
            )
            self._write()

    def _write(self) -> None:
        self._backend.set(self._key, encode_entries(self._entries))

    def save(self) -> None:
        self._write()
        self.notifier.emit()

    def _mutate(self, callback: Callable[[List[Entry]], Any]) -> Any:
        snapshot = [(entry, entry.completed) for entry in self._entries]
        result = callback(self._entries)
        try:
            self.save()
        except Exception:
            self._entries[:] = [entry for entry, _completed in snapshot]
            for entry, completed in snapshot:
                entry.completed = completed
            logger.error("Could not persist calendar entries; change rolled back")
            raise
        return result

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.notifier.subscribe(listener)

    # ------------------------------------------------------------------ mutations

    def add_single(self, kind: EntryKind, title: str, date: str) -> Entry:
        try:
            kind = EntryKind(kind)
        except ValueError as exc:
            raise InvalidInputError(f"Unknown entry type: {kind!r}") from exc
        if kind is EntryKind.TRIP:
            raise InvalidInputError("Trips need a start and an end; use add_range().")
        entry = Entry.todo(title, date) if kind is EntryKind.TODO else Entry.event(title, date)

        def _append(entries: List[Entry]) -> Entry:
            entries.append(entry)
            return entry

        logger.debug("Adding %s %r on %s", kind.value, title, date)
        return self._mutate(_append)

    def add_range(self, title: str, start: str, end: str) -> Entry:
        entry = Entry.trip(title, start, end)
        if start > end:
            logger.warning("Trip %r ends (%s) before it starts (%s); it will not match any day", title, end, start)

        def _append(entries: List[Entry]) -> Entry:
            entries.append(entry)
            return entry

        logger.debug("Adding trip %r from %s to %s", title, start, end)
        return self._mutate(_append)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            raise IndexOutOfRangeError(f"No entry at index {index} (have {len(self._entries)})")

    def toggle_completed(self, index: int) -> Entry:
        self._check_index(index)
        entry = self._entries[index]
        if entry.kind is not EntryKind.TODO:
            return entry

        def _flip(_entries: List[Entry]) -> Entry:
            entry.completed = not entry.completed
            return entry

        logger.debug("Toggling todo %r at index %d", entry.title, index)
        return self._mutate(_flip)

    def delete(self, index: int) -> Entry:
        self._check_index(index)

        def _remove(entries: List[Entry]) -> Entry:
            return entries.pop(index)

        removed = self._mutate(_remove)
        logger.debug("Deleted %s %r from index %d", removed.kind.value, removed.title, index)
        return removed

    # ------------------------------------------------------------------ queries

    def entries_on_date(self, date_key: str) -> List[Entry]:
        parse_date_key(date_key)
        return [entry for entry in self._entries if entry.occurs_on(date_key)]

    def summary_for_date(self, date_key: str) -> DaySummary:
        return summarize_day(self.entries_on_date(date_key))

    def index_of(self, entry: Entry) -> int:
        for index, candidate in enumerate(self._entries):
            if candidate is entry:
                return index
        raise IndexOutOfRangeError(f"Entry {entry.title!r} is no longer in the store")


__all__ = ["EventStore", "decode_entries", "encode_entries"]
