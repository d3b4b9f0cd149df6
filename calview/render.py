"""
rich renderables for the month view, the week view and event lists.

These functions only build tables; printing is left to the caller's
console so tests can render into a recording Console.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from calview.bucketing import bucket_by_day_and_hour
from calview.dates import is_today, month_cells, week_days
from calview.layout import DAY_NAMES, HOURS, event_geometry, event_style, format_hour, format_time
from calview.model import DEFAULT_EVENT_COLOR, CalendarEvent, CalendarGridCell


def _event_chip(ev: CalendarEvent) -> Text:
    color = ev.color or DEFAULT_EVENT_COLOR
    return Text(f" {ev.title} ", style=f"black on {color}", overflow="ellipsis", no_wrap=True)


def _cell_text(cell: CalendarGridCell, max_events: int) -> Text:
    if cell.is_today:
        day_style = "bold white on blue"
    elif cell.muted:
        day_style = "dim"
    else:
        day_style = "bold"

    text = Text(f"{cell.date.day:>2}", style=day_style)
    for ev in cell.events[:max_events]:
        text.append("\n")
        text.append_text(_event_chip(ev))
    hidden = len(cell.events) - max_events
    if hidden > 0:
        text.append(f"\n+{hidden} more", style="cyan")
    return text


def month_view(
    reference: date,
    events: Iterable[CalendarEvent],
    today: Optional[date] = None,
    max_cell_events: int = 3,
) -> Table:
    """
    6 x 7 month grid titled '<Month> <Year>'.
    """
    table = Table(title=reference.strftime("%B %Y"), box=box.SQUARE, show_lines=True, expand=True)
    for name in DAY_NAMES:
        table.add_column(name, justify="left", vertical="top", ratio=1)

    cells = month_cells(reference, events, today=today)
    for row in range(0, len(cells), 7):
        table.add_row(*[_cell_text(c, max_cell_events) for c in cells[row : row + 7]])
    return table


def _slot_text(events: Sequence[CalendarEvent], hour_unit: float) -> Text:
    text = Text()
    for i, ev in enumerate(events):
        if i:
            text.append("\n")
        geo = event_geometry(ev)
        style = event_style(ev, unit_per_hour=hour_unit)
        text.append_text(_event_chip(ev))
        text.append(f" {format_time(ev.start_date)} ({geo.height_hours:g}h) ", style="dim")
        # bar length follows the block height; at least one mark for zero/negative heights
        text.append("\u258c" * max(1, round(style["height"])), style=style["background"])
    return text


def week_view(
    reference: date,
    events: Iterable[CalendarEvent],
    today: Optional[date] = None,
    hours: Sequence[int] = HOURS,
    hour_unit: float = 4.0,
) -> Table:
    """
    Hour rows x Sunday..Saturday columns for reference's week.
    """
    days = week_days(reference)
    slots = bucket_by_day_and_hour(events, days)

    title = f"Week of {days[0].isoformat()}"
    table = Table(title=title, box=box.SIMPLE_HEAD, expand=True)
    table.add_column("", justify="right", style="dim", no_wrap=True)
    for name, d in zip(DAY_NAMES, days):
        style = "bold white on blue" if is_today(d, today) else "bold"
        table.add_column(Text(f"{name} {d.day}", style=style), ratio=1)

    for hour in hours:
        row: list[Text | str] = [format_hour(hour)]
        for d in days:
            row.append(_slot_text(slots.get((d, hour), []), hour_unit))
        table.add_row(*row)
    return table


def event_table(events: Iterable[CalendarEvent], title: str = "Events") -> Table:
    """
    Flat list of events in start order.
    """
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Title")
    table.add_column("Category", style="green")

    for ev in sorted(events, key=lambda e: (e.start_date, e.id)):
        table.add_row(
            ev.id,
            ev.start_date.date().isoformat(),
            f"{format_time(ev.start_date)}-{format_time(ev.end_date)}",
            _event_chip(ev),
            ev.category or "",
        )
    return table


def error_lines(errors: dict[str, str]) -> list[str]:
    """
    One 'field: message' line per validation error.
    """
    return [f"{name}: {msg}" for name, msg in errors.items()]
