"""
iCalendar (.ics) export.

We convert calendar events into a file that can be imported into:
- Google Calendar
- Outlook
- Apple Calendar

Timestamps are written as floating local times (no TZID), matching the
calendar's lack of timezone handling.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from calview.model import CalendarEvent

logger = logging.getLogger(__name__)


def _ics_escape(text: str) -> str:
    """
    Escape text for ICS fields (very small subset, sufficient for our use).
    """
    return (
        text.replace("\\", "\\\\").replace("\r\n", "\\n").replace("\n", "\\n").replace(";", "\\;").replace(",", "\\,")
    )


def _dt_local(value: datetime) -> str:
    return value.strftime("%Y%m%dT%H%M00")


def events_to_ics(events: Iterable[CalendarEvent], now: Optional[datetime] = None) -> tuple[str, int]:
    """
    Build the calendar text. Returns (text, number of exported events).

    Events whose end is not after their start are skipped.
    """
    stamp = (now if now is not None else datetime.now(timezone.utc)).strftime("%Y%m%dT%H%M%SZ")

    lines: list[str] = []
    lines.append("BEGIN:VCALENDAR")
    lines.append("VERSION:2.0")
    lines.append("PRODID:-//calview//EN")
    lines.append("CALSCALE:GREGORIAN")

    count = 0
    for ev in events:
        if ev.end_date <= ev.start_date:
            logger.warning("Skipping event %s: end is not after start", ev.id)
            continue

        lines.append("BEGIN:VEVENT")
        lines.append(f"UID:{_ics_escape(ev.id)}")
        lines.append(f"DTSTAMP:{stamp}")
        lines.append(f"DTSTART:{_dt_local(ev.start_date)}")
        lines.append(f"DTEND:{_dt_local(ev.end_date)}")
        lines.append(f"SUMMARY:{_ics_escape(ev.title.strip() or 'Event')}")
        if ev.description and ev.description.strip():
            lines.append(f"DESCRIPTION:{_ics_escape(ev.description.strip())}")
        if ev.category:
            lines.append(f"CATEGORIES:{_ics_escape(ev.category)}")
        lines.append("END:VEVENT")
        count += 1

    lines.append("END:VCALENDAR")

    # ICS standard uses CRLF
    return "\r\n".join(lines) + "\r\n", count


def export_events_to_ics(events: Iterable[CalendarEvent], out_path: str | Path) -> int:
    """
    Export events to an .ics file. Returns number of exported events.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    text, count = events_to_ics(events)
    out.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d events to %s", count, out)
    return count
