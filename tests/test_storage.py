"""
Unit tests for local storage of events.

Storage contract:
- Missing/invalid file -> no events
- Malformed records are skipped, valid ones still load
- JSON schema: {"events": [ ... ]}
"""

import json
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from calview.model import CalendarEvent
from calview.storage import load_events, save_events


def _ev(event_id: str, hour: int) -> CalendarEvent:
    return CalendarEvent(
        id=event_id,
        title=f"Event {event_id}",
        start_date=datetime(2024, 1, 15, hour, 0),
        end_date=datetime(2024, 1, 15, hour, 45),
        description="notes",
        color="#10b981",
        category="Work",
    )


class TestStorage(unittest.TestCase):
    def test_load_missing_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "missing.json"
            self.assertEqual(load_events(p), ())

    def test_load_corrupt_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "events.json"
            p.write_text("{not json", encoding="utf-8")
            with self.assertLogs("calview.storage", level="WARNING"):
                self.assertEqual(load_events(p), ())

    def test_save_and_load_roundtrip(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "nested" / "events.json"
            save_events([_ev("b", 14), _ev("a", 9)], p)
            loaded = load_events(p)
            self.assertEqual([e.id for e in loaded], ["a", "b"])
            self.assertEqual(loaded[0], _ev("a", 9))

            data = json.loads(p.read_text(encoding="utf-8"))
            self.assertIn("events", data)
            self.assertEqual(data["events"][0]["start_date"], "2024-01-15T09:00")

    def test_malformed_record_is_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "events.json"
            payload = {"events": [_ev("ok", 9).to_dict(), {"id": "bad", "title": "x", "start_date": "nope"}]}
            p.write_text(json.dumps(payload), encoding="utf-8")
            with self.assertLogs("calview.storage", level="WARNING"):
                loaded = load_events(p)
            self.assertEqual([e.id for e in loaded], ["ok"])


if __name__ == "__main__":
    unittest.main()
