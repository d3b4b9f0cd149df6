"""
Scripted run of the interactive menu loop.

Prompts are answered from a list and output goes to a throwaway console,
so the loop can be driven end to end without a terminal.
"""

import io
import tempfile
import unittest
from datetime import date, datetime
from pathlib import Path
from unittest import mock

from rich.console import Console

import calview.interactive as interactive
from calview.config import Settings
from calview.storage import load_events


class TestInteractive(unittest.TestCase):
    def _run(self, answers: list[str], events_path: Path) -> str:
        out = io.StringIO()
        settings = Settings(events_path=events_path)
        with mock.patch.object(interactive, "_prompt", side_effect=answers), mock.patch.object(
            interactive, "console", Console(file=out, width=200, color_system=None)
        ):
            interactive.run_interactive(settings, today=date(2024, 1, 15))
        return out.getvalue()

    def test_create_then_delete(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "events.json"

            # create: title, description, start date, start time, end date, end time, color, category
            self._run(["c", "Lunch", "", "", "12:00", "", "13:00", "2", "Personal", "0"], p)
            events = load_events(p)
            self.assertEqual(len(events), 1)
            self.assertEqual(events[0].start_date, datetime(2024, 1, 15, 12, 0))
            self.assertEqual(events[0].color, "#10b981")
            self.assertEqual(events[0].category, "Personal")

            self._run(["d", "1", "y", "0"], p)
            self.assertEqual(load_events(p), ())

    def test_invalid_form_shows_errors_and_can_give_up(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "events.json"
            text = self._run(["c", "", "", "", "10:00", "", "09:00", "", "", "n", "0"], p)
            self.assertIn("title: Title is required", text)
            self.assertIn("end_date:", text)
            self.assertFalse(p.exists())

    def test_navigation(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "events.json"
            text = self._run(["n", "v", "p", "x", "0"], p)
            self.assertIn("February 2024", text)
            self.assertIn("Week of 2024-01-21", text)
            self.assertIn("No events.", text)

    def test_date_answer_that_looks_like_markup(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "events.json"
            text = self._run(["c", "T", "", "[/x]", "n", "0"], p)
            self.assertIn("Invalid date '[/x]'", text)
            self.assertFalse(p.exists())


if __name__ == "__main__":
    unittest.main()
