"""Theme lookup with name normalization, fallbacks and registry statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from PIL import ImageColor

from .background import is_transparent
from .models import THEME_FIELDS, ThemeColors
from .themes import DEFAULT_THEME_NAME, THEMES, list_themes, theme_count

logger = logging.getLogger("streakcard.renderer")


@dataclass(frozen=True)
class ThemeResolution:
    theme: ThemeColors
    found: bool
    resolved_name: str


@dataclass
class ThemeStats:
    total: int
    gradient_themes: list[str] = field(default_factory=list)
    transparent_themes: list[str] = field(default_factory=list)
    dark_themes: list[str] = field(default_factory=list)
    light_themes: list[str] = field(default_factory=list)


def _candidates(normalized: str) -> tuple[str, ...]:
    return (normalized, normalized.replace("-", "_"), normalized.replace("_", "-"))


def resolve_theme_with_status(theme_name: str | None = None) -> ThemeResolution:
    default = THEMES[DEFAULT_THEME_NAME]
    if not theme_name:
        return ThemeResolution(theme=default, found=True, resolved_name=DEFAULT_THEME_NAME)

    normalized = theme_name.strip().lower()
    for candidate in _candidates(normalized):
        theme = THEMES.get(candidate)
        if theme is not None:
            return ThemeResolution(theme=theme, found=True, resolved_name=candidate)

    logger.debug("unknown theme %r, falling back to %r", theme_name, DEFAULT_THEME_NAME)
    return ThemeResolution(theme=default, found=False, resolved_name=DEFAULT_THEME_NAME)


def resolve_theme(theme_name: str | None = None) -> ThemeColors:
    return resolve_theme_with_status(theme_name).theme


def search_themes(pattern: str) -> list[str]:
    needle = pattern.strip().lower()
    return [name for name in list_themes() if needle in name]


def get_themes_by_category(prefix: str) -> list[str]:
    needle = prefix.strip().lower()
    return [name for name in list_themes() if name.startswith(needle)]


def is_valid_theme(theme: Any) -> bool:
    if theme is None:
        return False
    if isinstance(theme, dict):
        return all(isinstance(theme.get(key), str) for key in THEME_FIELDS)
    return all(isinstance(getattr(theme, key, None), str) for key in THEME_FIELDS)


def create_custom_theme(base_name: str | None, overrides: dict[str, str | None]) -> ThemeColors:
    """Overlay colour fields onto a resolved base theme; the base is left untouched.

    Keys that are not theme fields, and ``None`` values, are ignored.
    """
    changes = {k: v for k, v in overrides.items() if k in THEME_FIELDS and v is not None}
    return replace(resolve_theme(base_name), **changes)


def _is_gradient_background(background: str) -> bool:
    if "," not in background:
        return False
    try:
        float(background.split(",")[0].strip())
    except ValueError:
        return False
    return True


def _luminance(background: str) -> float | None:
    digits = background.lstrip("#")
    if len(digits) < 6:
        return None
    try:
        r, g, b = ImageColor.getrgb(f"#{digits[:6]}")[:3]
    except ValueError:
        return None
    return 0.299 * r + 0.587 * g + 0.114 * b


def get_theme_stats() -> ThemeStats:
    stats = ThemeStats(total=theme_count())

    for name in list_themes():
        background = THEMES[name].background

        if _is_gradient_background(background):
            stats.gradient_themes.append(name)
        elif is_transparent(background):
            stats.transparent_themes.append(name)
        elif "dark" in name or "night" in name:
            stats.dark_themes.append(name)
        elif "light" in name:
            stats.light_themes.append(name)
        else:
            luminance = _luminance(background)
            if luminance is None:
                # Short-hand or otherwise unreadable backgrounds stay uncategorized.
                continue
            if luminance < 128:
                stats.dark_themes.append(name)
            else:
                stats.light_themes.append(name)

    return stats
