"""
Date helpers and the month/week grid generator.

Rules:
- Gregorian calendar, weeks start on Sunday
- the month grid is always 6 rows x 7 columns (42 dates)
- all arithmetic goes through timedelta so month/year boundaries normalize themselves
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from calview.model import CalendarEvent, CalendarGridCell

GRID_SIZE = 42
WEEK_LENGTH = 7

ONE_DAY = timedelta(days=1)


def as_date(value: date) -> date:
    """
    Truncate a date or datetime to a plain date.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def sunday_index(value: date) -> int:
    """
    Day of week with Sunday = 0 ... Saturday = 6.
    """
    # date.weekday() counts from Monday = 0
    return (value.weekday() + 1) % 7


def is_same_day(a: date, b: date) -> bool:
    return as_date(a) == as_date(b)


def is_same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month


def is_today(value: date, today: Optional[date] = None) -> bool:
    """
    True if value falls on today's date. Tests pass `today` explicitly.
    """
    return is_same_day(value, today if today is not None else date.today())


def days_between(start: date, end: date) -> int:
    """
    Whole days from start to end, rounded down (negative if end is earlier).
    """
    return (end - start) // ONE_DAY


def days_in_month(reference: date) -> list[date]:
    """
    Every date of reference's month, in order.
    """
    first = date(reference.year, reference.month, 1)
    out: list[date] = []
    d = first
    while d.month == first.month:
        out.append(d)
        d += ONE_DAY
    return out


def month_grid(reference: date) -> list[date]:
    """
    Return the 42 consecutive dates shown by a month view.

    The grid starts on the Sunday on or before the first of reference's
    month, so leading/trailing dates of the adjacent months are included.
    """
    first = date(reference.year, reference.month, 1)
    start = first - timedelta(days=sunday_index(first))
    return [start + timedelta(days=i) for i in range(GRID_SIZE)]


def week_days(reference: date) -> list[date]:
    """
    Return the 7 consecutive dates (Sunday..Saturday) of reference's week.
    """
    day = as_date(reference)
    start = day - timedelta(days=sunday_index(day))
    return [start + timedelta(days=i) for i in range(WEEK_LENGTH)]


def month_cells(
    reference: date,
    events: Iterable[CalendarEvent] = (),
    today: Optional[date] = None,
) -> list[CalendarGridCell]:
    """
    Build the month grid as cells: muted outside reference's month,
    flagged when today, with the day's events attached in input order.
    """
    from calview.bucketing import bucket_by_day

    buckets = bucket_by_day(events)
    current = today if today is not None else date.today()

    cells: list[CalendarGridCell] = []
    for d in month_grid(reference):
        cells.append(
            CalendarGridCell(
                date=d,
                muted=not is_same_month(d, reference),
                is_today=is_today(d, current),
                events=tuple(buckets.get(d, [])),
            )
        )
    return cells
