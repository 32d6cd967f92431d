import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from streakcard_renderer import CardOptions, build_render_context, derive_render_id


class OverridePrecedenceTests(unittest.TestCase):
    def test_theme_colours_without_overrides(self):
        ctx = build_render_context(CardOptions(theme="dracula"))
        self.assertEqual(ctx.colors.ring, "#FF6E96")
        self.assertEqual(ctx.colors.background, "#282A36")
        self.assertEqual(ctx.background.type, "solid")

    def test_ring_override_carries_fire(self):
        ctx = build_render_context(CardOptions(theme="dracula", ring="#00FF00"))
        self.assertEqual(ctx.colors.ring, "#00FF00")
        self.assertEqual(ctx.colors.fire, "#00FF00")

    def test_fire_override_wins_over_ring(self):
        ctx = build_render_context(CardOptions(theme="dracula", ring="#00FF00", fire="#0000FF"))
        self.assertEqual(ctx.colors.ring, "#00FF00")
        self.assertEqual(ctx.colors.fire, "#0000FF")

    def test_independent_overrides(self):
        ctx = build_render_context(CardOptions(theme="dracula", dates="#111111", stroke="#222222", side_nums=""))
        self.assertEqual(ctx.colors.dates, "#111111")
        self.assertEqual(ctx.colors.stroke, "#222222")
        self.assertEqual(ctx.colors.side_nums, "#FF6E96")

    def test_background_override_is_reparsed(self):
        ctx = build_render_context(CardOptions(theme="dracula", background="90,000000,FFFFFF", render_id="abc"))
        self.assertEqual(ctx.background.type, "gradient")
        self.assertEqual(ctx.colors.background, "url(#bg-gradient-abc)")
        self.assertIn('id="bg-gradient-abc"', ctx.background.defs)

    def test_transparent_theme(self):
        ctx = build_render_context(CardOptions(theme="transparent"))
        self.assertEqual(ctx.colors.background, "transparent")

    def test_gradient_theme(self):
        ctx = build_render_context(CardOptions(theme="sunset-gradient"))
        self.assertEqual(ctx.colors.background, f"url(#{ctx.gradient_id})")


class RenderIdTests(unittest.TestCase):
    def test_deterministic(self):
        a = derive_render_id(CardOptions(theme="dracula"))
        b = derive_render_id(CardOptions(theme="dracula"))
        self.assertEqual(a, b)
        self.assertEqual(len(a), 10)

    def test_inputs_change_the_id(self):
        base = derive_render_id(CardOptions(theme="dracula"))
        self.assertNotEqual(base, derive_render_id(CardOptions(theme="nord")))
        self.assertNotEqual(base, derive_render_id(CardOptions(theme="dracula", width=600)))
        self.assertNotEqual(base, derive_render_id(CardOptions(theme="dracula", ring="#000")))

    def test_explicit_id_is_used(self):
        ctx = build_render_context(CardOptions(render_id="card1"))
        self.assertEqual(ctx.gradient_id, "bg-gradient-card1")
        self.assertEqual(ctx.clip_id, "outer-rectangle-card1")
        self.assertEqual(ctx.mask_id, "ring-mask-card1")


class DimensionTests(unittest.TestCase):
    def test_negative_width_clamps(self):
        ctx = build_render_context(CardOptions(width=-10, height=300, border_radius=0))
        self.assertEqual(ctx.dimensions.width, 0)
        self.assertEqual(ctx.dimensions.height, 300)
        self.assertEqual(ctx.dimensions.border_radius, 0)


if __name__ == "__main__":
    unittest.main()
