"""Card generator settings: environment inputs, JSON config files and normalization."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

from streakcard_renderer import CardOptions, StreakCardError

DEFAULT_OUTPUT_PATH = "github-streak.svg"

# CardOptions field -> action input name (read as INPUT_<NAME>).
_CARD_INPUTS: dict[str, str] = {
    "theme": "THEME",
    "animate": "ANIMATED",
    "locale": "LOCALE",
    "date_format": "DATE_FORMAT",
    "border_radius": "BORDER_RADIUS",
    "hide_border": "HIDE_BORDER",
    "width": "CARD_WIDTH",
    "height": "CARD_HEIGHT",
    "number_format": "NUMBER_FORMAT",
    "stroke_type": "STROKE_TYPE",
    "fire": "FIRE",
    "ring": "RING",
    "curr_streak_num": "CURR_STREAK_NUM",
    "side_nums": "SIDE_NUMS",
    "curr_streak_label": "CURR_STREAK_LABEL",
    "side_labels": "SIDE_LABELS",
    "dates": "DATES",
    "background": "BACKGROUND",
    "stroke": "STROKE",
}
_CARD_FIELDS = {f.name for f in fields(CardOptions)}


class ConfigError(StreakCardError):
    """Required settings are missing."""


@dataclass
class ActionConfig:
    username: str | None = None
    token: str | None = field(default=None, repr=False)
    output_path: str = DEFAULT_OUTPUT_PATH
    log_json: bool = False
    card: CardOptions = field(default_factory=CardOptions)


def _read_optional(environ: Mapping[str, str], name: str) -> str | None:
    raw = environ.get(f"INPUT_{name}")
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _to_float(raw: Any, default: float) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


def _to_int(raw: Any, default: int) -> int:
    try:
        return int(float(raw))
    except (TypeError, ValueError):
        return default


def _normalize_card(raw: Mapping[str, Any]) -> CardOptions:
    """Coerce loosely typed values onto CardOptions; bad values fall back to defaults."""
    defaults = CardOptions()
    values: dict[str, Any] = {}
    for key, value in raw.items():
        if key in _CARD_FIELDS and value is not None:
            values[key] = value

    card = replace(defaults, **values)
    animate = card.animate if isinstance(card.animate, bool) else str(card.animate).strip().lower() != "false"
    hide_border = card.hide_border if isinstance(card.hide_border, bool) else str(card.hide_border).strip().lower() == "true"
    number_format = card.number_format if card.number_format in ("short", "full") else "full"
    stroke_type = card.stroke_type if card.stroke_type in ("round", "butt") else "round"

    return replace(
        card,
        theme=str(card.theme or defaults.theme),
        locale=str(card.locale or defaults.locale),
        animate=animate,
        hide_border=hide_border,
        width=max(0, _to_int(card.width, int(defaults.width))),
        height=_to_int(card.height, int(defaults.height)),
        border_radius=_to_float(card.border_radius, defaults.border_radius),
        number_format=number_format,
        stroke_type=stroke_type,
    )


def load_action_config(environ: Mapping[str, str] | None = None) -> ActionConfig:
    env = os.environ if environ is None else environ
    card_raw = {key: _read_optional(env, name) for key, name in _CARD_INPUTS.items()}
    log_json = (_read_optional(env, "LOG_JSON") or "").lower() == "true"
    return ActionConfig(
        username=_read_optional(env, "USERNAME"),
        token=_read_optional(env, "GITHUB_TOKEN"),
        output_path=_read_optional(env, "OUTPUT_PATH") or DEFAULT_OUTPUT_PATH,
        log_json=log_json,
        card=_normalize_card(card_raw),
    )


def load_config_file(path: Path, base: ActionConfig | None = None) -> ActionConfig:
    """Overlay a JSON settings file onto ``base``; missing or corrupt files change nothing."""
    cfg = base or ActionConfig()
    if not path.exists():
        return cfg

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return cfg
    if not isinstance(raw, dict):
        return cfg

    card_raw = asdict(cfg.card)
    card_overrides = raw.get("card")
    if isinstance(card_overrides, dict):
        card_raw.update(card_overrides)
    return ActionConfig(
        username=raw.get("username") or cfg.username,
        token=cfg.token,
        output_path=raw.get("output_path") or cfg.output_path,
        log_json=bool(raw.get("log_json", cfg.log_json)),
        card=_normalize_card(card_raw),
    )


def save_config(cfg: ActionConfig, path: Path) -> Path:
    payload = {
        "username": cfg.username,
        "output_path": cfg.output_path,
        "log_json": cfg.log_json,
        "card": asdict(cfg.card),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    return path


def validate_action_config(cfg: ActionConfig) -> None:
    errors: list[str] = []
    if not cfg.username:
        errors.append("USERNAME is required.")
    if not cfg.token:
        errors.append("GITHUB_TOKEN is required.")
    if errors:
        details = "\n".join(f"- {item}" for item in errors)
        raise ConfigError(f"Missing required inputs:\n{details}")
