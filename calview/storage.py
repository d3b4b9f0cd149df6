"""
Persistent storage for the user's events.

This module manages the file (see calview.config):

    data/events.json

JSON schema:

    {"events": [{"id": ..., "title": ..., "start_date": "2024-01-15T09:00", ...}, ...]}

The calendar core never reads or writes files; only the CLI and the
interactive loop go through this module.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from calview.config import default_events_path
from calview.model import CalendarEvent

logger = logging.getLogger(__name__)


def load_events(path: str | Path | None = None) -> tuple[CalendarEvent, ...]:
    """
    Load events from events.json.

    Returns an empty tuple if the file does not exist or is invalid.
    Malformed records are skipped with a warning.
    """
    events_path = Path(path) if path is not None else default_events_path()

    # First run: nothing saved yet
    if not events_path.exists():
        logger.debug("No events file at %s", events_path)
        return ()

    try:
        data = json.loads(events_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s (%s); starting with no events", events_path, exc)
        return ()

    raw = data.get("events", []) if isinstance(data, dict) else []
    if not isinstance(raw, list):
        logger.warning("Unexpected 'events' value in %s; starting with no events", events_path)
        return ()

    out: list[CalendarEvent] = []
    for item in raw:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object event record: %r", item)
            continue
        try:
            out.append(CalendarEvent.from_dict(item))
        except (KeyError, ValueError, TypeError) as exc:
            logger.warning("Skipping malformed event record %r: %s", item.get("id"), exc)

    logger.debug("Loaded %d events from %s", len(out), events_path)
    return tuple(out)


def save_events(events: Iterable[CalendarEvent], path: str | Path | None = None) -> None:
    """
    Save events to events.json, creating parent directories if needed.

    Events are written in start order so the file stays readable.
    """
    events_path = Path(path) if path is not None else default_events_path()
    events_path.parent.mkdir(parents=True, exist_ok=True)

    ordered = sorted(events, key=lambda ev: (ev.start_date, ev.id))
    payload = {"events": [ev.to_dict() for ev in ordered]}

    events_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.debug("Saved %d events to %s", len(ordered), events_path)
