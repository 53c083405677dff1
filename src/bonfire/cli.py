from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence

from .bootstrap import configure_logging
from .core.datekeys import format_date_key, today_key
from .core.grid import WEEKDAY_LABELS, build_month_grid
from .data import MemoryBackend
from .domain import DaySummary, Entry, EntryKind
from .errors import BonfireError
from .services import DashboardContext

logger = logging.getLogger(__name__)

_MARKERS = {EntryKind.EVENT: "*", EntryKind.TRIP: "~", EntryKind.TODO: "+"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bonfire", description="Bonfire dashboard calendar.")
    parser.add_argument("--memory", action="store_true", help="Use a throwaway in-memory store.")
    parser.add_argument("--log-level", default=None, help="Override BONFIRE_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("gui", help="Launch the desktop dashboard.")
    subparsers.add_parser("list", help="List every entry with its index.")

    today_parser = subparsers.add_parser("today", help="Show what is happening today.")
    today_parser.add_argument("--date", default=None, help="Show another day (YYYY-MM-DD).")

    month_parser = subparsers.add_parser("month", help="Print a month grid with entry markers.")
    month_parser.add_argument("--year", type=int, default=None)
    month_parser.add_argument("--month", type=int, default=None, help="1-12")

    add_parser = subparsers.add_parser("add", help="Add an event, todo or trip.")
    add_parser.add_argument("kind", choices=[kind.value for kind in EntryKind])
    add_parser.add_argument("title")
    add_parser.add_argument("date", help="Date key, or trip start (YYYY-MM-DD).")
    add_parser.add_argument("--end", default=None, help="Trip end date key; defaults to the start.")

    toggle_parser = subparsers.add_parser("toggle", help="Toggle a todo by index.")
    toggle_parser.add_argument("index", type=int)

    delete_parser = subparsers.add_parser("delete", help="Delete an entry by index.")
    delete_parser.add_argument("index", type=int)

    return parser


def describe(entry: Entry) -> str:
    if entry.kind is EntryKind.TRIP:
        when = f"{entry.start} .. {entry.end}"
    else:
        when = entry.date or ""
    check = ""
    if entry.kind is EntryKind.TODO:
        check = "[x] " if entry.completed else "[ ] "
    return f"{entry.kind.value:<5} {when:<24} {check}{entry.title}"


def summary_marker(summary: DaySummary) -> str:
    marks = []
    for kind in summary.kinds:
        if kind is EntryKind.TODO and summary.todo_completed:
            marks.append("x")
        else:
            marks.append(_MARKERS[kind])
    return "".join(marks)


def render_month(context: DashboardContext, year: int, month0: int) -> List[str]:
    lines = [f"{year:04d}-{month0 + 1:02d}", " ".join(f"{label:<6}" for label in WEEKDAY_LABELS).rstrip()]
    today = today_key(context.clock())
    cells: List[str] = []
    for day in build_month_grid(year, month0):
        if day is None:
            cells.append("")
            continue
        key = format_date_key(year, month0, day)
        label = f"{day:>2}{summary_marker(context.store.summary_for_date(key))}"
        cells.append(f"[{label}]" if key == today else label)
    for start in range(0, len(cells), 7):
        lines.append(" ".join(f"{cell:<6}" for cell in cells[start : start + 7]).rstrip())
    return lines


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def run_command(args: argparse.Namespace, context: DashboardContext) -> int:
    store = context.store
    if args.command == "list":
        if not len(store):
            print("No entries.")
        _print_lines(f"{index:>3}  {describe(entry)}" for index, entry in enumerate(store.entries))
    elif args.command == "today":
        key = args.date or today_key(context.clock())
        entries = store.entries_on_date(key)
        if not entries:
            print("No events scheduled. Add one in the calendar.")
        _print_lines(f"{store.index_of(entry):>3}  {describe(entry)}" for entry in entries)
    elif args.command == "month":
        now = context.clock()
        year = args.year if args.year is not None else now.year
        month0 = (args.month if args.month is not None else now.month) - 1
        _print_lines(render_month(context, year, month0))
    elif args.command == "add":
        kind = EntryKind(args.kind)
        if kind is EntryKind.TRIP:
            entry = store.add_range(args.title, args.date, args.end or args.date)
        else:
            entry = store.add_single(kind, args.title, args.date)
        print(f"Added {describe(entry)}")
    elif args.command == "toggle":
        print(describe(store.toggle_completed(args.index)))
    elif args.command == "delete":
        print(f"Deleted {describe(store.delete(args.index))}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "add" and args.end is not None and args.kind != EntryKind.TRIP.value:
        parser.error("--end only applies to trips")
    configure_logging(args.log_level)
    logger.info("Bonfire CLI starting: %s", args.command)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui()
        return 0

    try:
        context = DashboardContext(backend=MemoryBackend()) if args.memory else DashboardContext()
        return run_command(args, context)
    except (BonfireError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
