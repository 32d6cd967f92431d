import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from streakcard_core.config import (
    ActionConfig,
    ConfigError,
    load_action_config,
    load_config_file,
    save_config,
    validate_action_config,
)


class LoadActionConfigTests(unittest.TestCase):
    def test_defaults(self):
        cfg = load_action_config({})
        self.assertIsNone(cfg.username)
        self.assertEqual(cfg.output_path, "github-streak.svg")
        self.assertEqual(cfg.card.theme, "default")
        self.assertTrue(cfg.card.animate)
        self.assertFalse(cfg.card.hide_border)
        self.assertIsNone(cfg.card.ring)

    def test_inputs_are_read(self):
        env = {
            "INPUT_USERNAME": "octocat",
            "INPUT_GITHUB_TOKEN": "secret",
            "INPUT_THEME": "dracula",
            "INPUT_OUTPUT_PATH": "out/card.svg",
            "INPUT_ANIMATED": "false",
            "INPUT_HIDE_BORDER": "true",
            "INPUT_CARD_WIDTH": "800",
            "INPUT_CARD_HEIGHT": "400",
            "INPUT_BORDER_RADIUS": "10.5",
            "INPUT_NUMBER_FORMAT": "short",
            "INPUT_STROKE_TYPE": "butt",
            "INPUT_RING": "#00FF00",
            "INPUT_BACKGROUND": "45,FF8A00,E52E71",
            "INPUT_LOG_JSON": "true",
        }
        cfg = load_action_config(env)
        self.assertEqual(cfg.username, "octocat")
        self.assertEqual(cfg.token, "secret")
        self.assertEqual(cfg.output_path, "out/card.svg")
        self.assertTrue(cfg.log_json)
        self.assertEqual(cfg.card.theme, "dracula")
        self.assertFalse(cfg.card.animate)
        self.assertTrue(cfg.card.hide_border)
        self.assertEqual((cfg.card.width, cfg.card.height), (800, 400))
        self.assertEqual(cfg.card.border_radius, 10.5)
        self.assertEqual(cfg.card.number_format, "short")
        self.assertEqual(cfg.card.stroke_type, "butt")
        self.assertEqual(cfg.card.ring, "#00FF00")
        self.assertEqual(cfg.card.background, "45,FF8A00,E52E71")

    def test_bad_values_are_normalized(self):
        env = {
            "INPUT_ANIMATED": "no",
            "INPUT_HIDE_BORDER": "yes",
            "INPUT_CARD_WIDTH": "-40",
            "INPUT_CARD_HEIGHT": "tall",
            "INPUT_BORDER_RADIUS": "round",
            "INPUT_NUMBER_FORMAT": "tiny",
            "INPUT_STROKE_TYPE": "square",
            "INPUT_FIRE": "   ",
        }
        card = load_action_config(env).card
        self.assertTrue(card.animate)
        self.assertFalse(card.hide_border)
        self.assertEqual(card.width, 0)
        self.assertEqual(card.height, 195)
        self.assertEqual(card.border_radius, 4.5)
        self.assertEqual(card.number_format, "full")
        self.assertEqual(card.stroke_type, "round")
        self.assertIsNone(card.fire)

    def test_token_is_hidden_from_repr(self):
        cfg = ActionConfig(username="octocat", token="secret")
        self.assertNotIn("secret", repr(cfg))


class ConfigFileTests(unittest.TestCase):
    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "streakcard.json"
            cfg = load_action_config({"INPUT_USERNAME": "octocat", "INPUT_GITHUB_TOKEN": "secret", "INPUT_THEME": "nord"})
            save_config(cfg, path)

            raw = json.loads(path.read_text(encoding="utf-8"))
            self.assertNotIn("token", raw)
            self.assertNotIn("secret", path.read_text(encoding="utf-8"))

            loaded = load_config_file(path)
            self.assertEqual(loaded.username, "octocat")
            self.assertEqual(loaded.card.theme, "nord")
            self.assertIsNone(loaded.token)

    def test_file_overlays_base(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cfg.json"
            path.write_text(json.dumps({"card": {"locale": "de", "width": "600"}}), encoding="utf-8")
            base = load_action_config({"INPUT_USERNAME": "octocat", "INPUT_GITHUB_TOKEN": "t", "INPUT_THEME": "nord"})

            cfg = load_config_file(path, base=base)
            self.assertEqual(cfg.username, "octocat")
            self.assertEqual(cfg.token, "t")
            self.assertEqual(cfg.card.theme, "nord")
            self.assertEqual(cfg.card.locale, "de")
            self.assertEqual(cfg.card.width, 600)

    def test_missing_or_corrupt_file_yields_base(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = load_config_file(Path(tmp) / "nope.json")
            self.assertEqual(missing.card.theme, "default")

            corrupt = Path(tmp) / "bad.json"
            corrupt.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config_file(corrupt).output_path, "github-streak.svg")

    def test_non_object_card_section_keeps_base_card(self):
        base = load_action_config({"INPUT_THEME": "nord", "INPUT_LOCALE": "de"})
        with tempfile.TemporaryDirectory() as tmp:
            for card in (["x"], "abc", 7, None):
                path = Path(tmp) / "cfg.json"
                path.write_text(json.dumps({"username": "octocat", "card": card}), encoding="utf-8")

                cfg = load_config_file(path, base=base)
                self.assertEqual(cfg.username, "octocat")
                self.assertEqual(cfg.card, base.card)


class ValidateConfigTests(unittest.TestCase):
    def test_lists_every_missing_input(self):
        with self.assertRaises(ConfigError) as ctx:
            validate_action_config(ActionConfig())
        self.assertIn("USERNAME", str(ctx.exception))
        self.assertIn("GITHUB_TOKEN", str(ctx.exception))

    def test_complete_config_passes(self):
        validate_action_config(ActionConfig(username="octocat", token="t"))


if __name__ == "__main__":
    unittest.main()
