import tempfile
import unittest
from datetime import date
from pathlib import Path

from lasperiod.export_ics import export_periods_to_ics
from lasperiod.model import StudyPeriod


class TestExportICS(unittest.TestCase):
    def test_export_creates_file_and_contains_calendar(self) -> None:
        periods = [
            StudyPeriod(year=2024, period=1, start_date=date(2024, 9, 2), end_date=date(2024, 11, 1)),
            StudyPeriod(year=2024, period=2, start_date=date(2024, 11, 4), end_date=date(2025, 1, 17)),
        ]

        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "sub" / "out.ics"
            n = export_periods_to_ics(periods, out)
            self.assertEqual(n, 2)
            text = out.read_text(encoding="utf-8")
            self.assertIn("BEGIN:VCALENDAR", text)
            self.assertEqual(text.count("BEGIN:VEVENT"), 2)
            self.assertIn("SUMMARY:Läsperiod 1 2024/2025", text)
            self.assertIn("DTSTART;VALUE=DATE:20240902", text)
            # all-day DTEND is exclusive
            self.assertIn("DTEND;VALUE=DATE:20241102", text)
            self.assertTrue(text.endswith("END:VCALENDAR\r\n"))

    def test_export_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "empty.ics"
            self.assertEqual(export_periods_to_ics([], out), 0)
            self.assertNotIn("BEGIN:VEVENT", out.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
