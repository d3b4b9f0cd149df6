"""
Group a flat list of events by calendar day or by (day, hour) slot.

Bucketing rule:
    an event belongs to the day (and hour) its start_date falls on
Events are never duplicated into other days or hours, even when they run
past midnight. Within a bucket, events keep their input order.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable

from calview.dates import as_date, is_same_day
from calview.model import CalendarEvent


def day_key(value: date) -> date:
    """
    Calendar-day key of a date or datetime (time of day dropped).
    """
    return as_date(value)


def bucket_by_day(events: Iterable[CalendarEvent]) -> dict[date, list[CalendarEvent]]:
    """
    Map each start day to the events starting on it.
    """
    buckets: dict[date, list[CalendarEvent]] = defaultdict(list)
    for ev in events:
        buckets[day_key(ev.start_date)].append(ev)
    return dict(buckets)


def bucket_by_day_and_hour(
    events: Iterable[CalendarEvent], days: Iterable[date]
) -> dict[tuple[date, int], list[CalendarEvent]]:
    """
    Map (day, hour) slots of the given days to the events starting in them.

    Events that start outside the given days are left out.
    """
    # duplicate days would file an event twice
    day_list = list(dict.fromkeys(day_key(d) for d in days))
    buckets: dict[tuple[date, int], list[CalendarEvent]] = defaultdict(list)

    # O(events x days); days is a week at most
    for ev in events:
        for day in day_list:
            if is_same_day(ev.start_date, day):
                buckets[(day, ev.start_date.hour)].append(ev)
    return dict(buckets)
