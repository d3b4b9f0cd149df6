"""
Geometry of events inside the hour-based week grid.

Each hour is one row. An event block starts `top_fraction` of the way into
the row of its start hour and is `height_hours` rows tall; the renderer
multiplies that by its own per-hour unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from calview.model import DEFAULT_EVENT_COLOR, CalendarEvent

HOURS = list(range(24))
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class EventGeometry:
    top_fraction: float
    height_hours: float


def event_geometry(event: CalendarEvent) -> EventGeometry:
    """
    Compute where an event block starts within its hour row and how many
    hour rows it spans.

    Only hour/minute components are used. An event ending on a later day
    therefore gets a wrong (possibly negative) height; nothing is clamped.
    """
    start = event.start_date
    end = event.end_date
    top = start.minute / 60
    height = (end.hour - start.hour) + (end.minute - start.minute) / 60
    return EventGeometry(top_fraction=top, height_hours=height)


def event_style(event: CalendarEvent, unit_per_hour: float = 4.0) -> dict[str, Any]:
    """
    Style values for drawing an event block: top offset in percent of the
    hour row, height in units, and background color.
    """
    geo = event_geometry(event)
    return {
        "top": geo.top_fraction * 100,
        "height": geo.height_hours * unit_per_hour,
        "background": event.color or DEFAULT_EVENT_COLOR,
    }


def format_hour(hour: int) -> str:
    """
    12-hour label for an hour row, e.g. 0 -> '12:00 AM', 13 -> '1:00 PM'.
    """
    h = 12 if hour == 0 else hour - 12 if hour > 12 else hour
    ampm = "AM" if hour < 12 else "PM"
    return f"{h}:00 {ampm}"


def format_time(value: datetime) -> str:
    return value.strftime("%H:%M")
