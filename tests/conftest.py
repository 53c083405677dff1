from __future__ import annotations

from datetime import datetime

import orjson
import pytest

from bonfire.core.event_store import EventStore
from bonfire.core.notifier import ChangeNotifier
from bonfire.data import MemoryBackend

STORE_KEY = "personal-dashboard-events"
NOW = datetime(2026, 2, 10, 9, 30)


class FakeClock:
    def __init__(self, moment: datetime = NOW) -> None:
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend, clock: FakeClock) -> EventStore:
    instance = EventStore(backend, key=STORE_KEY, notifier=ChangeNotifier(), clock=clock)
    instance.load()
    return instance


def persisted(backend: MemoryBackend) -> list:
    return orjson.loads(backend.get(STORE_KEY))
