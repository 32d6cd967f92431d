import sys
import unittest
from dataclasses import replace
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from streakcard_renderer import CardOptions, StreakCardData, generate_streak_card, generate_theme_preview

TODAY = date(2024, 6, 1)

DATA = StreakCardData(
    username="octocat",
    total_contributions=1234,
    current_streak=42,
    longest_streak=100,
    streak_start_date="2024-04-21",
    streak_end_date="2024-06-01",
    first_contribution_date="2020-01-15T00:00:00Z",
    longest_streak_start_date="2023-01-01",
    longest_streak_end_date="2023-04-10",
)


class StreakCardTests(unittest.TestCase):
    def test_dracula_card(self):
        svg = generate_streak_card(DATA, CardOptions(theme="dracula", width=800, height=400), today=TODAY)
        self.assertTrue(svg.startswith("<svg "))
        self.assertIn("viewBox='0 0 800 400'", svg)
        self.assertIn("rx='4.5' ry='4.5'", svg)
        self.assertIn("fill='#282A36'", svg)
        self.assertIn(">42</text>", svg)
        self.assertIn(">1,234</text>", svg)
        self.assertIn(">Jan 15, 2020 - Present</text>", svg)
        self.assertIn(">Apr 21 - Jun 1</text>", svg)
        self.assertIn(">Jan 1, 2023 - Apr 10, 2023</text>", svg)
        self.assertIn("@keyframes currstreak", svg)

    def test_element_ids_share_one_suffix(self):
        svg = generate_streak_card(DATA, CardOptions(theme="sunset-gradient", render_id="x1"), today=TODAY)
        self.assertIn("id='outer-rectangle-x1'", svg)
        self.assertIn("clip-path='url(#outer-rectangle-x1)'", svg)
        self.assertIn("id='ring-mask-x1'", svg)
        self.assertIn("mask='url(#ring-mask-x1)'", svg)
        self.assertIn('id="bg-gradient-x1"', svg)
        self.assertIn("fill='url(#bg-gradient-x1)'", svg)

    def test_output_is_deterministic(self):
        a = generate_streak_card(DATA, CardOptions(theme="nord"), today=TODAY)
        b = generate_streak_card(DATA, CardOptions(theme="nord"), today=TODAY)
        self.assertEqual(a, b)

    def test_longest_dates_are_optional(self):
        data = replace(DATA, longest_streak_start_date=None, longest_streak_end_date=None)
        with_dates = generate_streak_card(DATA, today=TODAY)
        without = generate_streak_card(data, today=TODAY)
        self.assertEqual(with_dates.count("font-size='12px'"), 3)
        self.assertEqual(without.count("font-size='12px'"), 2)
        self.assertIn(">Longest Streak</text>", without)

    def test_hide_border(self):
        svg = generate_streak_card(DATA, CardOptions(hide_border=True), today=TODAY)
        self.assertIn("stroke='none' stroke-width='0'/>", svg)
        shown = generate_streak_card(DATA, CardOptions(hide_border=False), today=TODAY)
        self.assertIn("stroke='#E4E2E2' stroke-width='1'/>", shown)

    def test_static_card_has_no_animation(self):
        svg = generate_streak_card(DATA, CardOptions(animate=False), today=TODAY)
        self.assertNotIn("@keyframes", svg)
        self.assertNotIn("animation:", svg)
        self.assertNotIn("opacity: 0", svg)

    def test_text_is_escaped(self):
        data = replace(DATA, first_contribution_date="<b>&'\"")
        svg = generate_streak_card(data, today=TODAY)
        self.assertIn("&lt;b&gt;&amp;&apos;&quot;", svg)
        self.assertNotIn("<b>", svg)

    def test_short_numbers_and_butt_caps(self):
        data = replace(DATA, total_contributions=15300)
        svg = generate_streak_card(data, CardOptions(number_format="short", stroke_type="butt"), today=TODAY)
        self.assertIn(">15.3K</text>", svg)
        self.assertIn("stroke-linecap='butt'", svg)

    def test_streak_counts_are_not_grouped_or_shortened(self):
        data = replace(DATA, total_contributions=1234, current_streak=1234, longest_streak=5678)
        full = generate_streak_card(data, today=TODAY)
        self.assertIn(">1,234</text>", full)
        self.assertIn(">1234</text>", full)
        self.assertIn(">5678</text>", full)
        self.assertNotIn(">5,678</text>", full)

        short = generate_streak_card(data, CardOptions(number_format="short"), today=TODAY)
        self.assertIn(">1.2K</text>", short)
        self.assertIn(">1234</text>", short)
        self.assertIn(">5678</text>", short)

    def test_vertical_anchors_follow_height(self):
        reference = generate_streak_card(DATA, CardOptions(width=600, height=195), today=TODAY)
        self.assertIn("<text x='100' y='79'", reference)
        self.assertIn("<circle cx='300' cy='72' r='40'", reference)
        self.assertIn("<line x1='200' y1='28' x2='200' y2='170'", reference)

        # 400 - 195 = 205, so every anchor moves down by 102.5.
        tall = generate_streak_card(DATA, CardOptions(width=600, height=400), today=TODAY)
        self.assertIn("<text x='100' y='181.5'", tall)
        self.assertIn("<text x='500' y='181.5'", tall)
        self.assertIn("<text x='300' y='232.5'", tall)
        self.assertIn("<text x='100' y='260.5'", tall)
        self.assertIn("<circle cx='300' cy='174.5' r='40'", tall)
        self.assertIn("translate(300, 120.5)", tall)
        self.assertIn("<ellipse cx='300' cy='138.5'", tall)
        self.assertIn("<line x1='200' y1='130.5' x2='200' y2='272.5'", tall)
        self.assertIn("<line x1='400' y1='130.5' x2='400' y2='272.5'", tall)
        self.assertNotIn("y='79'", tall)

        short = generate_streak_card(DATA, CardOptions(width=600, height=95), today=TODAY)
        self.assertIn("<text x='100' y='29'", short)
        self.assertIn("<circle cx='300' cy='22' r='40'", short)

    def test_ring_override_colours_flame_in_markup(self):
        svg = generate_streak_card(DATA, CardOptions(theme="dracula", ring="#123456"), today=TODAY)
        self.assertIn("stroke='#123456' stroke-width='5'", svg)
        self.assertIn("fill='#123456' stroke-opacity='0'/>", svg)
        self.assertNotIn("#FF6E96' stroke-width='5'", svg)

    def test_fire_override_splits_from_ring_in_markup(self):
        svg = generate_streak_card(DATA, CardOptions(theme="dracula", ring="#FF0000", fire="#00FF00"), today=TODAY)
        self.assertIn("stroke='#FF0000' stroke-width='5'", svg)
        self.assertIn("fill='#00FF00' stroke-opacity='0'/>", svg)
        self.assertNotIn("fill='#FF0000' stroke-opacity='0'/>", svg)

    def test_rtl_locale(self):
        svg = generate_streak_card(DATA, CardOptions(locale="ar"), today=TODAY)
        self.assertIn("direction='rtl'", svg)
        self.assertIn("direction='ltr'", generate_streak_card(DATA, today=TODAY))

    def test_unknown_theme_renders_default(self):
        svg = generate_streak_card(DATA, CardOptions(theme="no-such-theme"), today=TODAY)
        self.assertIn("fill='#FFFEFE'", svg)

    def test_zero_size_card_still_renders(self):
        svg = generate_streak_card(DATA, CardOptions(width=0, height=0), today=TODAY)
        self.assertIn("viewBox='0 0 0 0'", svg)


class ThemePreviewTests(unittest.TestCase):
    def test_one_card_per_theme(self):
        previews = generate_theme_preview(DATA, ["dracula", "nord", "missing"], today=TODAY)
        self.assertEqual(list(previews), ["dracula", "nord", "missing"])
        self.assertIn("fill='#282A36'", previews["dracula"])
        self.assertIn("fill='#FFFEFE'", previews["missing"])
        self.assertNotEqual(previews["dracula"], previews["nord"])


if __name__ == "__main__":
    unittest.main()
