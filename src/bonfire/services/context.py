from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from ..config import AppSettings, get_settings
from ..core.event_store import EventStore
from ..core.notifier import ChangeNotifier
from ..data import JsonFileBackend, KeyValueBackend


@dataclass(slots=True)
class DashboardContext:
    """One store, one notifier and one clock, handed to every view explicitly."""

    settings: AppSettings = field(default_factory=get_settings)
    backend: Optional[KeyValueBackend] = None
    clock: Callable[[], datetime] = datetime.now
    notifier: ChangeNotifier = field(default_factory=ChangeNotifier)
    store: EventStore = field(init=False)

    def __post_init__(self) -> None:
        if self.backend is None:
            self.backend = JsonFileBackend(self.settings.storage.path)
        self.store = EventStore(
            self.backend,
            key=self.settings.storage.key,
            notifier=self.notifier,
            clock=self.clock,
        )
        self.store.load()
