import orjson

from bonfire.core.event_store import EventStore
from bonfire.data import JsonFileBackend, MemoryBackend
from bonfire.domain import EntryKind

from .conftest import STORE_KEY, FakeClock


def test_memory_backend_get_and_set():
    backend = MemoryBackend()
    assert backend.get("missing") is None
    backend.set("k", "v")
    assert backend.get("k") == "v"


def test_json_file_backend_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dashboard.json"
    backend = JsonFileBackend(path)
    assert backend.get(STORE_KEY) is None
    backend.set(STORE_KEY, "[]")
    assert path.exists()
    assert orjson.loads(path.read_bytes()) == {STORE_KEY: "[]"}


def test_json_file_backend_keeps_other_keys(tmp_path):
    path = tmp_path / "dashboard.json"
    backend = JsonFileBackend(path)
    backend.set("weather", "sunny")
    backend.set(STORE_KEY, "[]")
    backend.set(STORE_KEY, '[{"type": "event"}]')
    assert backend.get("weather") == "sunny"
    assert backend.get(STORE_KEY) == '[{"type": "event"}]'
    assert not list(tmp_path.glob("*.tmp"))


def test_json_file_backend_tolerates_unreadable_file(tmp_path):
    path = tmp_path / "dashboard.json"
    path.write_text("not json at all", encoding="utf-8")
    backend = JsonFileBackend(path)
    assert backend.get(STORE_KEY) is None
    backend.set(STORE_KEY, "[]")
    assert backend.get(STORE_KEY) == "[]"


def test_json_file_backend_accepts_inline_lists(tmp_path):
    path = tmp_path / "dashboard.json"
    path.write_bytes(orjson.dumps({STORE_KEY: [{"type": "event", "title": "x", "date": 4}]}))
    store = EventStore(JsonFileBackend(path), key=STORE_KEY, clock=FakeClock())
    store.load()
    assert store.entries[0].date == "2026-02-04"


def test_store_round_trip_through_a_file(tmp_path):
    path = tmp_path / "dashboard.json"
    store = EventStore(JsonFileBackend(path), key=STORE_KEY, clock=FakeClock())
    store.load()
    store.add_range("Lisbon", "2026-03-18", "2026-03-21")
    store.add_single(EntryKind.TODO, "Pack", "2026-03-17")

    reopened = EventStore(JsonFileBackend(path), key=STORE_KEY, clock=FakeClock())
    reopened.load()
    assert reopened.entries == store.entries
