"""Renderer package for streak card themes, formatting and SVG composition."""

from .background import (
    angle_to_coordinates,
    generate_gradient_defs,
    is_gradient,
    is_transparent,
    is_valid_hex_color,
    normalize_color,
    parse_background,
    parse_gradient,
)
from .card import StreakCardRenderer, generate_streak_card, generate_theme_preview
from .context import build_render_context, derive_render_id
from .errors import StreakCardError, ThemeRegistryError
from .formatting import format_date, format_date_range, format_number
from .models import (
    CardDimensions,
    CardOptions,
    ColorSet,
    GradientInfo,
    GradientStop,
    ParsedBackground,
    RenderContext,
    StreakCardData,
    ThemeColors,
)
from .swatches import palette_sheet_png, render_palette_sheet
from .theme_resolver import (
    ThemeResolution,
    ThemeStats,
    create_custom_theme,
    get_theme_stats,
    get_themes_by_category,
    is_valid_theme,
    resolve_theme,
    resolve_theme_with_status,
    search_themes,
)
from .themes import DEFAULT_THEME_NAME, get_theme, list_themes, theme_count
from .translations import TranslationStrings, get_translations, normalize_locale_code

__all__ = [
    "CardDimensions",
    "CardOptions",
    "ColorSet",
    "DEFAULT_THEME_NAME",
    "GradientInfo",
    "GradientStop",
    "ParsedBackground",
    "RenderContext",
    "StreakCardData",
    "StreakCardError",
    "StreakCardRenderer",
    "ThemeColors",
    "ThemeRegistryError",
    "ThemeResolution",
    "ThemeStats",
    "TranslationStrings",
    "angle_to_coordinates",
    "build_render_context",
    "create_custom_theme",
    "derive_render_id",
    "format_date",
    "format_date_range",
    "format_number",
    "generate_gradient_defs",
    "generate_streak_card",
    "generate_theme_preview",
    "get_theme",
    "get_theme_stats",
    "get_themes_by_category",
    "get_translations",
    "is_gradient",
    "is_transparent",
    "is_valid_hex_color",
    "is_valid_theme",
    "list_themes",
    "normalize_color",
    "normalize_locale_code",
    "palette_sheet_png",
    "parse_background",
    "parse_gradient",
    "render_palette_sheet",
    "resolve_theme",
    "resolve_theme_with_status",
    "search_themes",
    "theme_count",
]
