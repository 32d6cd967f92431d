import sys
import unittest
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from streakcard_renderer.formatting import format_date, format_date_range, format_number

TODAY = date(2024, 6, 1)


class FormatDateTests(unittest.TestCase):
    def test_same_year_omits_year(self):
        self.assertEqual(format_date("2024-03-05", "en", today=TODAY), "Mar 5")

    def test_other_year_adds_year(self):
        self.assertEqual(format_date("2023-03-05T12:00:00Z", "en", today=TODAY), "Mar 5, 2023")

    def test_php_pattern(self):
        self.assertEqual(format_date("2024-03-05", "en", "M j[, Y]", today=TODAY), "Mar 5")
        self.assertEqual(format_date("2023-03-05", "en", "M j[, Y]", today=TODAY), "Mar 5, 2023")
        self.assertEqual(format_date("2023-03-05", "en", "d/m/y", today=TODAY), "05/03/23")

    def test_locale_pattern_hint(self):
        self.assertEqual(format_date("2024-03-05", "ja", today=TODAY), "3.5")
        self.assertEqual(format_date("2023-03-05", "ja", today=TODAY), "2023.3.5")

    def test_unknown_locale_uses_english(self):
        self.assertEqual(format_date("2023-03-05", "xx", today=TODAY), "Mar 5, 2023")

    def test_lenient_and_unparsable_input(self):
        self.assertEqual(format_date("2024-03-05 garbage", "en", today=TODAY), "Mar 5")
        self.assertEqual(format_date("not a date", "en", today=TODAY), "not a date")
        self.assertEqual(format_date("", "en", today=TODAY), "")


class FormatDateRangeTests(unittest.TestCase):
    def test_range(self):
        self.assertEqual(format_date_range("2024-05-20", "2024-06-01", "en", today=TODAY), "May 20 - Jun 1")

    def test_identical_ends_collapse(self):
        self.assertEqual(format_date_range("2024-05-20", "2024-05-20", "en", today=TODAY), "May 20")

    def test_present_uses_locale_label(self):
        self.assertEqual(format_date_range("2020-01-15", "Present", "en", today=TODAY), "Jan 15, 2020 - Present")
        self.assertTrue(format_date_range("2020-01-15", "Present", "de", today=TODAY).endswith(" - Heute"))
        self.assertEqual(
            format_date_range("2020-01-15", "Present", "en", present_label="Now", today=TODAY),
            "Jan 15, 2020 - Now",
        )


class FormatNumberTests(unittest.TestCase):
    def test_full_uses_locale_grouping(self):
        self.assertEqual(format_number(1234, "en"), "1,234")
        self.assertEqual(format_number(1234, "de"), "1.234")
        self.assertEqual(format_number(42, "en"), "42")

    def test_unknown_locale_falls_back_to_commas(self):
        self.assertEqual(format_number(1234567, "xx"), "1,234,567")

    def test_short(self):
        self.assertEqual(format_number(999, short=True), "999")
        self.assertEqual(format_number(1000, short=True), "1K")
        self.assertEqual(format_number(1500, short=True), "1.5K")
        self.assertEqual(format_number(2847, "en", True), "2.8K")
        self.assertEqual(format_number(1_000_000, short=True), "1M")
        self.assertEqual(format_number(2_500_000, short=True), "2.5M")
        self.assertEqual(format_number(3_000_000_000, short=True), "3B")


if __name__ == "__main__":
    unittest.main()
