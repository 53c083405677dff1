import pytest

from bonfire import cli
from bonfire.data import MemoryBackend
from bonfire.services import DashboardContext

from .conftest import FakeClock


@pytest.fixture
def context(monkeypatch):
    shared = DashboardContext(backend=MemoryBackend(), clock=FakeClock())
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(cli, "DashboardContext", lambda **kwargs: shared)
    return shared


def test_add_and_list(context, capsys):
    assert cli.main(["add", "event", "Dentist", "2026-02-15"]) == 0
    assert cli.main(["add", "trip", "Ski", "2026-02-20", "--end", "2026-02-24"]) == 0
    capsys.readouterr()

    assert cli.main(["list"]) == 0
    out = capsys.readouterr().out
    assert "0  event 2026-02-15" in out
    assert "1  trip  2026-02-20 .. 2026-02-24" in out


def test_today_uses_the_clock(context, capsys):
    cli.main(["today"])
    assert "No events scheduled" in capsys.readouterr().out

    context.store.add_single("todo", "Water plants", "2026-02-10")
    cli.main(["today"])
    assert "[ ] Water plants" in capsys.readouterr().out


def test_toggle_and_delete(context, capsys):
    context.store.add_single("todo", "Water plants", "2026-02-10")
    assert cli.main(["toggle", "0"]) == 0
    assert context.store.entries[0].completed is True
    assert cli.main(["delete", "0"]) == 0
    assert len(context.store) == 0


def test_errors_exit_with_status_one(context, capsys):
    assert cli.main(["delete", "3"]) == 1
    assert "error: No entry at index 3" in capsys.readouterr().err
    assert cli.main(["add", "event", "   ", "2026-02-15"]) == 1
    assert cli.main(["add", "event", "Party", "2026-02-31"]) == 1


def test_month_marks_days_with_entries(context, capsys):
    context.store.add_single("event", "Dentist", "2026-02-15")
    context.store.add_single("todo", "Rent", "2026-02-15")
    context.store.toggle_completed(1)
    context.store.add_range("Ski", "2026-02-27", "2026-03-02")

    assert cli.main(["month", "--year", "2026", "--month", "2"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "2026-02"
    assert "15*x" in out
    assert "28~" in out
    assert "[10]" in out


def test_end_is_only_for_trips(context, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["add", "event", "Dentist", "2026-02-15", "--end", "2026-02-16"])
    assert excinfo.value.code == 2
    assert "--end only applies to trips" in capsys.readouterr().err
    assert len(context.store) == 0


def test_storage_errors_exit_with_status_one(context, capsys, monkeypatch):
    def refuse(key, value):
        raise OSError("read-only file system")

    monkeypatch.setattr(context.backend, "set", refuse)
    assert cli.main(["add", "event", "Dentist", "2026-02-15"]) == 1
    assert "read-only file system" in capsys.readouterr().err
    assert len(context.store) == 0
