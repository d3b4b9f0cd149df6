from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calview.config import Settings
from calview.export_ics import export_events_to_ics
from calview.layout import format_time
from calview.model import CATEGORIES, EVENT_COLORS, CalendarEvent, EventForm
from calview.parse import parse_date, parse_time
from calview.render import error_lines, event_table, month_view, week_view
from calview.state import (
    CalendarState,
    commit_event,
    go_to_today,
    next_month,
    next_week,
    open_form,
    previous_month,
    previous_week,
    remove_event,
    set_view,
    submit_form,
)
from calview.storage import load_events, save_events

logger = logging.getLogger(__name__)

console = Console()


def _println(msg: str = "") -> None:
    console.print(msg, highlight=False)


def _prompt(msg: str) -> str:
    return console.input(escape(msg))


def _ask(label: str, default: str) -> str:
    """
    Prompt with a default shown in brackets; blank input keeps the default.
    """
    raw = _prompt(f"{label} [{default}]: ").strip()
    return raw if raw else default


def run_interactive(settings: Settings, today: Optional[date] = None) -> None:
    """
    Interactive menu loop: navigate months/weeks and create, edit or delete events.
    """
    state = CalendarState(current_date=today if today is not None else date.today())
    events = load_events(settings.events_path)

    while True:
        _print_view(state, events, settings, today)

        choice = _prompt(
            "\n[n] Next  [p] Previous  [t] Today  [v] Switch month/week\n"
            "[c] Create event  [e] Edit event  [d] Delete event  [l] List events  [x] Export .ics\n"
            "[0] Exit\n"
            "Select: "
        ).strip().lower()

        if choice == "0":
            _println("Bye.")
            return

        if choice == "n":
            state = next_month(state) if state.view == "month" else next_week(state)
        elif choice == "p":
            state = previous_month(state) if state.view == "month" else previous_week(state)
        elif choice == "t":
            state = go_to_today(state, today)
        elif choice == "v":
            state = set_view(state, "week" if state.view == "month" else "month")
        elif choice == "c":
            events = _flow_form(open_form(selected_date=state.current_date), events, settings)
        elif choice == "e":
            picked = _pick_event(events, "Edit event")
            if picked is not None:
                events = _flow_form(open_form(picked), events, settings)
        elif choice == "d":
            events = _flow_delete(events, settings)
        elif choice == "l":
            _flow_list(events)
        elif choice == "x":
            _flow_export(events)
        else:
            _println("Invalid choice.")


def _print_view(
    state: CalendarState, events: tuple[CalendarEvent, ...], settings: Settings, today: Optional[date]
) -> None:
    _println("\n=== calview (interactive) ===")
    _println(f"View: {state.view} | Date: {state.current_date.isoformat()} | Events: {len(events)}")
    if state.view == "month":
        console.print(month_view(state.current_date, events, today=today, max_cell_events=settings.max_cell_events))
    else:
        console.print(week_view(state.current_date, events, today=today, hour_unit=settings.hour_unit))


def _pick_event(events: tuple[CalendarEvent, ...], title: str) -> Optional[CalendarEvent]:
    if not events:
        _println("No events.")
        return None

    ordered = sorted(events, key=lambda e: (e.start_date, e.id))
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Event")
    for i, ev in enumerate(ordered, start=1):
        when = f"{ev.start_date.date().isoformat()} {format_time(ev.start_date)}-{format_time(ev.end_date)}"
        table.add_row(str(i), f"[cyan]{when}[/] | {escape(ev.title)}")
    console.print(table)

    pick = _prompt("Enter number (blank = cancel): ").strip()
    if not pick:
        return None
    if not pick.isdigit():
        _println("Not a number.")
        return None
    idx = int(pick)
    if not (1 <= idx <= len(ordered)):
        _println("Out of range.")
        return None
    return ordered[idx - 1]


def _pick_color(current: str) -> str:
    names = ", ".join(f"{i}={name}" for i, (name, _) in enumerate(EVENT_COLORS, start=1))
    current_name = next((name for name, value in EVENT_COLORS if value == current), current)
    pick = _prompt(f"Color ({names}) [{current_name}]: ").strip()
    if not pick:
        return current
    if pick.isdigit() and 1 <= int(pick) <= len(EVENT_COLORS):
        return EVENT_COLORS[int(pick) - 1][1]
    for name, value in EVENT_COLORS:
        if pick.lower() == name.lower():
            return value
    return pick


def _read_form(form: EventForm) -> Optional[EventForm]:
    """
    Ask for every field, offering the form's current values as defaults.
    Returns None if a date/time could not be parsed.
    """
    assert form.start_date is not None and form.end_date is not None

    title = _ask("Title", form.title)
    description = _ask("Description", form.description)
    try:
        start_day = parse_date(_ask("Start date", form.start_date.date().isoformat()))
        start_time = parse_time(_ask("Start time", format_time(form.start_date)))
        end_default = form.end_date.date() if form.is_edit else start_day
        end_day = parse_date(_ask("End date", end_default.isoformat()))
        end_time = parse_time(_ask("End time", format_time(form.end_date)))
    except ValueError as exc:
        _println(escape(str(exc)))
        return None
    color = _pick_color(form.color)
    category = _prompt(f"Category ({', '.join(CATEGORIES)}) [{form.category}]: ").strip() or form.category

    return replace(
        form,
        title=title,
        description=description,
        start_date=datetime.combine(start_day, start_time),
        end_date=datetime.combine(end_day, end_time),
        color=color,
        category=category,
    )


def _flow_form(
    form: EventForm, events: tuple[CalendarEvent, ...], settings: Settings
) -> tuple[CalendarEvent, ...]:
    """
    Create/edit loop: re-ask until the event validates or the user gives up.
    """
    _println("\n=== Edit Event ===" if form.is_edit else "\n=== Create Event ===")
    while True:
        filled = _read_form(form)
        if filled is not None:
            form = filled
            result = submit_form(form, existing=events)
            if result.ok and result.event is not None:
                events = commit_event(events, result.event)
                save_events(events, settings.events_path)
                _println(f"Saved: {result.event.id} | {escape(result.event.title)}")
                return events
            for line in error_lines(result.errors):
                _println(f"[red]{line}[/]")

        again = _prompt("Try again? [Y/n]: ").strip().lower()
        if again == "n":
            return events


def _flow_delete(events: tuple[CalendarEvent, ...], settings: Settings) -> tuple[CalendarEvent, ...]:
    picked = _pick_event(events, "Delete event")
    if picked is None:
        return events

    confirm = _prompt("Are you sure you want to delete this event? [y/N]: ").strip().lower()
    if confirm != "y":
        _println("Kept.")
        return events

    remaining = remove_event(events, picked.id)
    save_events(remaining, settings.events_path)
    _println(f"Deleted: {picked.id} | {escape(picked.title)}")
    return remaining


def _flow_list(events: tuple[CalendarEvent, ...]) -> None:
    if not events:
        _println("No events.")
        return
    console.print(event_table(events))
    _prompt("\nPress Enter to go back...")


def _flow_export(events: tuple[CalendarEvent, ...]) -> None:
    if not events:
        _println("No events.")
        return

    downloads = Path.home() / "Downloads"
    default_name = "calview.ics"

    out_in = _prompt(f"Please enter desired file name, default is [{default_name}]: ").strip()
    out_path = downloads / (out_in or default_name)

    # enforce .ics extension
    if out_path.suffix.lower() != ".ics":
        out_path = out_path.with_suffix(".ics")

    try:
        n = export_events_to_ics(events, out_path)
    except OSError as exc:
        logger.error("Export to %s failed: %s", out_path, exc)
        _println(f"Export failed: {escape(str(exc))}")
        return

    _println(f"\nExported {n} events.")
    _println(f"Saved to: {out_path.resolve()}")
