"""
Unit tests for grouping events by day and by (day, hour).

Rules:
- an event goes into the bucket of its start day / start hour only
- input order is kept inside a bucket
"""

import unittest
from datetime import date, datetime

from calview.bucketing import bucket_by_day, bucket_by_day_and_hour, day_key
from calview.dates import week_days
from calview.model import CalendarEvent


def _ev(event_id: str, start: datetime, end: datetime) -> CalendarEvent:
    return CalendarEvent(id=event_id, title=event_id, start_date=start, end_date=end)


class TestBucketByDay(unittest.TestCase):
    def test_event_goes_under_start_day(self) -> None:
        ev = _ev("a", datetime(2024, 1, 15, 9, 0), datetime(2024, 1, 15, 9, 30))
        buckets = bucket_by_day([ev])
        self.assertEqual(buckets, {date(2024, 1, 15): [ev]})

    def test_overnight_event_stays_on_start_day(self) -> None:
        ev = _ev("late", datetime(2024, 1, 15, 23, 0), datetime(2024, 1, 16, 1, 0))
        buckets = bucket_by_day([ev])
        self.assertIn(date(2024, 1, 15), buckets)
        self.assertNotIn(date(2024, 1, 16), buckets)

    def test_input_order_kept_and_nothing_lost(self) -> None:
        events = [
            _ev("b", datetime(2024, 1, 15, 14, 0), datetime(2024, 1, 15, 15, 0)),
            _ev("x", datetime(2024, 1, 16, 8, 0), datetime(2024, 1, 16, 9, 0)),
            _ev("a", datetime(2024, 1, 15, 8, 0), datetime(2024, 1, 15, 9, 0)),
        ]
        buckets = bucket_by_day(events)
        self.assertEqual([e.id for e in buckets[date(2024, 1, 15)]], ["b", "a"])

        flat = [e for bucket in buckets.values() for e in bucket]
        self.assertEqual(sorted(e.id for e in flat), sorted(e.id for e in events))

    def test_empty_input(self) -> None:
        self.assertEqual(bucket_by_day([]), {})

    def test_day_key_drops_time(self) -> None:
        self.assertEqual(day_key(datetime(2024, 1, 15, 23, 59)), date(2024, 1, 15))


class TestBucketByDayAndHour(unittest.TestCase):
    def test_event_goes_under_start_hour(self) -> None:
        ev = _ev("a", datetime(2024, 1, 15, 9, 0), datetime(2024, 1, 15, 9, 30))
        buckets = bucket_by_day_and_hour([ev], week_days(date(2024, 1, 15)))
        self.assertEqual(buckets, {(date(2024, 1, 15), 9): [ev]})

    def test_long_event_not_duplicated_into_later_hours(self) -> None:
        ev = _ev("long", datetime(2024, 1, 15, 9, 45), datetime(2024, 1, 15, 13, 0))
        buckets = bucket_by_day_and_hour([ev], week_days(date(2024, 1, 15)))
        self.assertEqual(list(buckets.keys()), [(date(2024, 1, 15), 9)])

    def test_events_outside_week_are_left_out(self) -> None:
        inside = _ev("in", datetime(2024, 1, 20, 18, 0), datetime(2024, 1, 20, 19, 0))
        outside = _ev("out", datetime(2024, 1, 21, 9, 0), datetime(2024, 1, 21, 10, 0))
        buckets = bucket_by_day_and_hour([inside, outside], week_days(date(2024, 1, 15)))
        self.assertEqual(buckets, {(date(2024, 1, 20), 18): [inside]})

    def test_same_slot_keeps_order(self) -> None:
        first = _ev("first", datetime(2024, 1, 15, 9, 30), datetime(2024, 1, 15, 10, 0))
        second = _ev("second", datetime(2024, 1, 15, 9, 0), datetime(2024, 1, 15, 10, 0))
        buckets = bucket_by_day_and_hour([first, second], week_days(date(2024, 1, 15)))
        self.assertEqual(buckets[(date(2024, 1, 15), 9)], [first, second])

    def test_repeated_day_counts_once(self) -> None:
        ev = _ev("a", datetime(2024, 1, 15, 9, 0), datetime(2024, 1, 15, 10, 0))
        days = [date(2024, 1, 15), datetime(2024, 1, 15, 12, 0), date(2024, 1, 16)]
        self.assertEqual(bucket_by_day_and_hour([ev], days), {(date(2024, 1, 15), 9): [ev]})

    def test_repeated_calls_are_equal(self) -> None:
        events = [_ev("a", datetime(2024, 1, 15, 9, 0), datetime(2024, 1, 15, 10, 0))]
        days = week_days(date(2024, 1, 15))
        self.assertEqual(bucket_by_day_and_hour(events, days), bucket_by_day_and_hour(events, days))


if __name__ == "__main__":
    unittest.main()
