import unittest
from pathlib import Path

from calview.config import DEFAULT_HOUR_UNIT, DEFAULT_MAX_CELL_EVENTS, default_events_path, load_settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = load_settings({})
        self.assertEqual(s.events_path, default_events_path())
        self.assertEqual(s.hour_unit, DEFAULT_HOUR_UNIT)
        self.assertEqual(s.max_cell_events, DEFAULT_MAX_CELL_EVENTS)

    def test_values_from_environment(self) -> None:
        s = load_settings(
            {"CALVIEW_EVENTS_PATH": "/tmp/cal.json", "CALVIEW_HOUR_UNIT": "2.5", "CALVIEW_MAX_CELL_EVENTS": "5"}
        )
        self.assertEqual(s.events_path, Path("/tmp/cal.json"))
        self.assertEqual(s.hour_unit, 2.5)
        self.assertEqual(s.max_cell_events, 5)

    def test_bad_numbers_fall_back(self) -> None:
        with self.assertLogs("calview.config", level="WARNING"):
            s = load_settings({"CALVIEW_HOUR_UNIT": "big", "CALVIEW_MAX_CELL_EVENTS": "0"})
        self.assertEqual(s.hour_unit, DEFAULT_HOUR_UNIT)
        self.assertEqual(s.max_cell_events, DEFAULT_MAX_CELL_EVENTS)

    def test_non_finite_numbers_fall_back(self) -> None:
        for raw in ("nan", "inf", "-inf"):
            with self.assertLogs("calview.config", level="WARNING"):
                s = load_settings({"CALVIEW_HOUR_UNIT": raw})
            self.assertEqual(s.hour_unit, DEFAULT_HOUR_UNIT)


if __name__ == "__main__":
    unittest.main()
