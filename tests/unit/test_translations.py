import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from streakcard_renderer.translations import get_translations, list_locales, normalize_locale_code


class NormalizeLocaleTests(unittest.TestCase):
    def test_normalization(self):
        self.assertEqual(normalize_locale_code("pt-br"), "pt_BR")
        self.assertEqual(normalize_locale_code("ZH_hant"), "zh_Hant")
        self.assertEqual(normalize_locale_code("EN"), "en")

    def test_garbage_is_english(self):
        self.assertEqual(normalize_locale_code(""), "en")
        self.assertEqual(normalize_locale_code(None), "en")
        self.assertEqual(normalize_locale_code("not a locale"), "en")


class TranslationLookupTests(unittest.TestCase):
    def test_english(self):
        t = get_translations("en")
        self.assertEqual(t.current_streak, "Current Streak")
        self.assertFalse(t.rtl)

    def test_partial_table_is_filled_from_english(self):
        t = get_translations("de")
        self.assertEqual(t.current_streak, "Aktuelle Serie")
        self.assertEqual(t.days, "days")

    def test_region_falls_back_to_language(self):
        self.assertEqual(get_translations("de-AT").current_streak, "Aktuelle Serie")

    def test_alias(self):
        self.assertEqual(get_translations("zh"), get_translations("zh_Hans"))

    def test_rtl_and_date_hint(self):
        self.assertTrue(get_translations("ar").rtl)
        self.assertEqual(get_translations("ja").date_format, "[Y.]n.j")

    def test_unknown_is_english(self):
        self.assertEqual(get_translations("xx"), get_translations("en"))

    def test_list_locales(self):
        locales = list_locales()
        self.assertIn("en", locales)
        self.assertEqual(locales, sorted(locales))


if __name__ == "__main__":
    unittest.main()
