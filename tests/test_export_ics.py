import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from calview.export_ics import export_events_to_ics
from calview.model import CalendarEvent


class TestExportICS(unittest.TestCase):
    def test_export_creates_file_and_contains_calendar(self) -> None:
        events = [
            CalendarEvent(
                id="evt-1705309200000",
                title="Design review, round 2",
                start_date=datetime(2024, 1, 15, 10, 15),
                end_date=datetime(2024, 1, 15, 12, 0),
                description="Bring mockups",
                category="Design",
            ),
            # end before start: skipped
            CalendarEvent(
                id="broken",
                title="Broken",
                start_date=datetime(2024, 1, 15, 12, 0),
                end_date=datetime(2024, 1, 15, 11, 0),
            ),
        ]

        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "out.ics"
            with self.assertLogs("calview.export_ics", level="WARNING"):
                n = export_events_to_ics(events, out)
            self.assertEqual(n, 1)
            text = out.read_text(encoding="utf-8")
            self.assertIn("BEGIN:VCALENDAR", text)
            self.assertEqual(text.count("BEGIN:VEVENT"), 1)
            self.assertIn("DTSTART:20240115T101500", text)
            self.assertIn("SUMMARY:Design review\\, round 2", text)
            self.assertIn("CATEGORIES:Design", text)


if __name__ == "__main__":
    unittest.main()
