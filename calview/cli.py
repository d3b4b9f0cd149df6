"""
CLI (Command Line Interface).

This module provides quick terminal commands, e.g.:

    calview month [--date 2024-01-15]
    calview week [--date 2024-01-15]
    calview list
    calview add --title "Standup" --date 2024-01-15 --start 09:00 --end 09:30
    calview edit <event_id> --title "Daily standup"
    calview remove <event_id>
    calview export <file.ics>
    calview interactive

Note:
- The interactive UI lives in calview/interactive.py
- Events are stored in the JSON file from calview.config (override with --events)
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from rich.console import Console

from calview.config import Settings, load_settings
from calview.export_ics import export_events_to_ics
from calview.log import setup_logging
from calview.model import EVENT_COLORS, CalendarEvent, EventForm
from calview.parse import parse_date, parse_optional_date, parse_time
from calview.render import error_lines, event_table, month_view, week_view
from calview.state import commit_event, find_event, open_form, remove_event, submit_form
from calview.storage import load_events, save_events

logger = logging.getLogger(__name__)

console = Console()


def resolve_color(value: Optional[str]) -> Optional[str]:
    """
    Accept a palette name ('Blue') or any color token ('#123456').
    """
    if value is None:
        return None
    v = value.strip()
    for name, hex_value in EVENT_COLORS:
        if v.lower() == name.lower():
            return hex_value
    return v


def _print_errors(errors: dict[str, str]) -> None:
    print("Event not saved:")
    for line in error_lines(errors):
        print(f"- {line}")


def _cmd_month(args: argparse.Namespace, settings: Settings, events: tuple[CalendarEvent, ...]) -> int:
    """
    Print the month grid containing --date (default: today).
    """
    ref = parse_optional_date(args.date, date.today())
    console.print(month_view(ref, events, max_cell_events=settings.max_cell_events))
    return 0


def _cmd_week(args: argparse.Namespace, settings: Settings, events: tuple[CalendarEvent, ...]) -> int:
    """
    Print the Sunday-Saturday week containing --date (default: today).
    """
    ref = parse_optional_date(args.date, date.today())
    console.print(week_view(ref, events, hour_unit=settings.hour_unit))
    return 0


def _cmd_list(events: tuple[CalendarEvent, ...]) -> int:
    if not events:
        print("No events.")
        return 0
    console.print(event_table(events))
    return 0


def _apply_args(form: EventForm, args: argparse.Namespace) -> EventForm:
    """
    Overlay the given CLI options on the form values.

    --date moves both start and end to that day unless --end-date is given;
    --start/--end change only the time of day.
    """
    assert form.start_date is not None and form.end_date is not None

    start_day = parse_date(args.date) if args.date else form.start_date.date()
    if args.end_date:
        end_day = parse_date(args.end_date)
    elif args.date:
        end_day = start_day
    else:
        end_day = form.end_date.date()

    start_time = parse_time(args.start) if args.start else form.start_date.time()
    end_time = parse_time(args.end) if args.end else form.end_date.time()

    updates: dict[str, object] = {
        "start_date": datetime.combine(start_day, start_time),
        "end_date": datetime.combine(end_day, end_time),
    }
    if args.title is not None:
        updates["title"] = args.title
    if args.description is not None:
        updates["description"] = args.description
    if args.color is not None:
        updates["color"] = resolve_color(args.color) or ""
    if args.category is not None:
        updates["category"] = args.category
    return replace(form, **updates)


def _save_form(form: EventForm, settings: Settings, events: tuple[CalendarEvent, ...]) -> int:
    result = submit_form(form, existing=events)
    if not result.ok or result.event is None:
        _print_errors(result.errors)
        return 1

    save_events(commit_event(events, result.event), settings.events_path)
    verb = "Updated" if form.is_edit else "Added"
    print(f"{verb}: {result.event.id} | {result.event.title}")
    return 0


def _cmd_add(args: argparse.Namespace, settings: Settings, events: tuple[CalendarEvent, ...]) -> int:
    """
    Create a new event (defaults: today, 09:00-10:00, first palette color).
    """
    try:
        form = _apply_args(open_form(selected_date=date.today()), args)
    except ValueError as exc:
        print(str(exc))
        return 1
    return _save_form(form, settings, events)


def _cmd_edit(args: argparse.Namespace, settings: Settings, events: tuple[CalendarEvent, ...]) -> int:
    """
    Change fields of an existing event. Unspecified fields keep their value.
    """
    existing = find_event(events, args.event_id.strip())
    if existing is None:
        print(f"No event with id: {args.event_id}")
        return 1
    try:
        form = _apply_args(open_form(existing), args)
    except ValueError as exc:
        print(str(exc))
        return 1
    return _save_form(form, settings, events)


def _cmd_remove(args: argparse.Namespace, settings: Settings, events: tuple[CalendarEvent, ...]) -> int:
    event_id = args.event_id.strip()
    existing = find_event(events, event_id)
    if existing is None:
        print(f"No event with id: {event_id}")
        return 1

    remaining = remove_event(events, event_id)
    save_events(remaining, settings.events_path)
    print(f"Removed: {event_id} | {existing.title} (remaining: {len(remaining)})")
    return 0


def _cmd_export(args: argparse.Namespace, events: tuple[CalendarEvent, ...]) -> int:
    """
    Export all events into an iCalendar (.ics) file.
    """
    if not events:
        print("No events to export.")
        return 0

    out_path = (args.out or "").strip()
    if not out_path:
        print("Please provide output .ics path.")
        return 1

    n = export_events_to_ics(events, out_path)
    print(f"Exported {n} events to: {out_path}")
    return 0


def _add_event_options(p: argparse.ArgumentParser, require_title: bool) -> None:
    p.add_argument("--title", type=str, required=require_title, help="Event title (max 100 characters)")
    p.add_argument("--description", type=str, help="Description (max 500 characters)")
    p.add_argument("--date", type=str, help="Start day YYYY-MM-DD")
    p.add_argument("--end-date", dest="end_date", type=str, help="End day YYYY-MM-DD (default: start day)")
    p.add_argument("--start", type=str, help="Start time HH:MM")
    p.add_argument("--end", type=str, help="End time HH:MM")
    p.add_argument("--color", type=str, help="Palette name (Blue, Green, ...) or color token")
    p.add_argument("--category", type=str, help="Free-form category (e.g. Meeting, Work)")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="calview", description="calview calendar CLI")
    parser.add_argument("--events", type=str, help="Path of the events JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_month = sub.add_parser("month", help="Show a month grid")
    p_month.add_argument("--date", type=str, help="Any day of the month (YYYY-MM-DD)")

    p_week = sub.add_parser("week", help="Show a week time grid")
    p_week.add_argument("--date", type=str, help="Any day of the week (YYYY-MM-DD)")

    sub.add_parser("list", help="List all events")

    p_add = sub.add_parser("add", help="Create an event")
    _add_event_options(p_add, require_title=True)

    p_edit = sub.add_parser("edit", help="Edit an event by id")
    p_edit.add_argument("event_id", type=str, help="Event ID (e.g. evt-1705309200000)")
    _add_event_options(p_edit, require_title=False)

    p_remove = sub.add_parser("remove", help="Delete an event by id")
    p_remove.add_argument("event_id", type=str, help="Event ID (e.g. evt-1705309200000)")

    p_export = sub.add_parser("export", help="Export events to .ics")
    p_export.add_argument("out", type=str, help="Output file path (e.g. out.ics)")

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)
    settings = load_settings()
    if args.events:
        settings = replace(settings, events_path=Path(args.events))
    logger.debug("Using events file %s", settings.events_path)

    events = load_events(settings.events_path)

    try:
        if args.command == "month":
            raise SystemExit(_cmd_month(args, settings, events))
        if args.command == "week":
            raise SystemExit(_cmd_week(args, settings, events))
    except ValueError as exc:
        print(str(exc))
        raise SystemExit(1)

    if args.command == "list":
        raise SystemExit(_cmd_list(events))
    if args.command == "add":
        raise SystemExit(_cmd_add(args, settings, events))
    if args.command == "edit":
        raise SystemExit(_cmd_edit(args, settings, events))
    if args.command == "remove":
        raise SystemExit(_cmd_remove(args, settings, events))
    if args.command == "export":
        raise SystemExit(_cmd_export(args, events))

    if args.command == "interactive":
        from calview.interactive import run_interactive

        run_interactive(settings)
        raise SystemExit(0)

    raise SystemExit(2)
