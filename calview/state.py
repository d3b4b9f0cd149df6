"""
Calendar UI state as plain values plus pure transition functions.

The caller (CLI / interactive loop) holds the current values and replaces
them with whatever these functions return:

    state = next_month(state)
    events = add_event(events, new_event)

Nothing here mutates its arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, time, timedelta
from typing import Any, Iterable, Optional

from calview.dates import as_date
from calview.model import EVENT_COLORS, CalendarEvent, EventForm, FormResult
from calview.validate import validate_event

VIEWS = ("month", "week")

DEFAULT_START_TIME = time(9, 0)
DEFAULT_END_TIME = time(10, 0)


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CalendarState:
    current_date: date
    view: str = "month"

    def __post_init__(self) -> None:
        if self.view not in VIEWS:
            raise ValueError(f"Unknown view: {self.view!r} (expected one of {', '.join(VIEWS)})")


def set_view(state: CalendarState, view: str) -> CalendarState:
    return replace(state, view=view)


def _first_of_month(year: int, month_index: int) -> date:
    """
    First day of a month given a 0-based month index that may overflow
    (e.g. -1 = December of the previous year, 12 = January of the next).
    """
    return date(year + month_index // 12, month_index % 12 + 1, 1)


def next_month(state: CalendarState) -> CalendarState:
    d = state.current_date
    return replace(state, current_date=_first_of_month(d.year, d.month))


def previous_month(state: CalendarState) -> CalendarState:
    d = state.current_date
    return replace(state, current_date=_first_of_month(d.year, d.month - 2))


def next_week(state: CalendarState) -> CalendarState:
    return replace(state, current_date=state.current_date + timedelta(days=7))


def previous_week(state: CalendarState) -> CalendarState:
    return replace(state, current_date=state.current_date - timedelta(days=7))


def go_to_today(state: CalendarState, today: Optional[date] = None) -> CalendarState:
    return replace(state, current_date=today if today is not None else date.today())


# ---------------------------------------------------------------------------
# Event collection (always returns a new tuple)
# ---------------------------------------------------------------------------


def add_event(events: Iterable[CalendarEvent], event: CalendarEvent) -> tuple[CalendarEvent, ...]:
    return (*events, event)


def update_event(
    events: Iterable[CalendarEvent], event_id: str, **updates: Any
) -> tuple[CalendarEvent, ...]:
    """
    Replace the fields given in `updates` on the event with `event_id`.
    Unknown ids leave the collection unchanged (as a new tuple).
    """
    return tuple(replace(ev, **updates) if ev.id == event_id else ev for ev in events)


def remove_event(events: Iterable[CalendarEvent], event_id: str) -> tuple[CalendarEvent, ...]:
    return tuple(ev for ev in events if ev.id != event_id)


def find_event(events: Iterable[CalendarEvent], event_id: str) -> Optional[CalendarEvent]:
    for ev in events:
        if ev.id == event_id:
            return ev
    return None


def new_event_id(now: Optional[datetime] = None) -> str:
    """
    Timestamp-derived id for a newly created event, e.g. 'evt-1760605200000'.
    """
    ts = now if now is not None else datetime.now()
    return f"evt-{int(ts.timestamp() * 1000)}"


def unique_event_id(events: Iterable[CalendarEvent], now: Optional[datetime] = None) -> str:
    """
    new_event_id(), suffixed with -2, -3, ... while it clashes with an id in events.
    """
    taken = {ev.id for ev in events}
    base = new_event_id(now)
    candidate = base
    n = 2
    while candidate in taken:
        candidate = f"{base}-{n}"
        n += 1
    return candidate


# ---------------------------------------------------------------------------
# Event form
# ---------------------------------------------------------------------------


def open_form(
    event: Optional[CalendarEvent] = None,
    selected_date: Optional[date] = None,
    now: Optional[datetime] = None,
) -> EventForm:
    """
    Initial form values.

    Edit mode (event given): copy the event's fields.
    Create mode: 09:00-10:00 on the selected date (or today), first palette color.
    """
    if event is not None:
        return EventForm(
            title=event.title,
            description=event.description or "",
            start_date=event.start_date,
            end_date=event.end_date,
            color=event.color or EVENT_COLORS[0][1],
            category=event.category or "",
            event_id=event.id,
        )

    if selected_date is not None:
        day = as_date(selected_date)
    else:
        day = (now if now is not None else datetime.now()).date()

    return EventForm(
        start_date=datetime.combine(day, DEFAULT_START_TIME),
        end_date=datetime.combine(day, DEFAULT_END_TIME),
    )


def submit_form(
    form: EventForm,
    now: Optional[datetime] = None,
    existing: Iterable[CalendarEvent] = (),
) -> FormResult:
    """
    Validate the form and, if it passes, build the event to commit.

    In create mode the new id avoids every id in `existing`.
    """
    errors = validate_event(form)
    if errors:
        return FormResult(event=None, errors=errors)

    # validate_event guarantees both timestamps are set here
    assert form.start_date is not None and form.end_date is not None

    event = CalendarEvent(
        id=form.event_id if form.event_id is not None else unique_event_id(existing, now),
        title=form.title.strip(),
        description=form.description.strip() or None,
        start_date=form.start_date,
        end_date=form.end_date,
        color=form.color or None,
        category=form.category or None,
    )
    return FormResult(event=event)


def commit_event(events: Iterable[CalendarEvent], event: CalendarEvent) -> tuple[CalendarEvent, ...]:
    """
    Add a new event, or replace the stored event with the same id.
    """
    items = tuple(events)
    if find_event(items, event.id) is None:
        return add_event(items, event)
    return tuple(event if ev.id == event.id else ev for ev in items)
