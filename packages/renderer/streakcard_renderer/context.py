"""Merge theme, dimensions and per-field overrides into one render context."""

from __future__ import annotations

import hashlib
from dataclasses import replace

from .background import normalize_color, parse_background
from .models import DEFAULT_DIMENSIONS, OVERRIDE_FIELDS, THEME_FIELDS, CardDimensions, CardOptions, ColorSet, RenderContext
from .theme_resolver import resolve_theme

# Applied one by one after ring/fire; each only replaces its own field.
_INDEPENDENT_OVERRIDES = ("curr_streak_num", "side_nums", "curr_streak_label", "side_labels", "dates", "stroke")


def derive_render_id(options: CardOptions) -> str:
    """Stable per-card id so definitions from several cards in one document never collide."""
    if options.render_id:
        return options.render_id
    parts = [options.theme or "", f"{options.width:g}", f"{options.height:g}", f"{options.border_radius:g}"]
    parts.extend(getattr(options, name) or "" for name in OVERRIDE_FIELDS)
    digest = hashlib.sha1("|".join(parts).encode("utf-8")).hexdigest()
    return digest[:10]


def build_dimensions(options: CardOptions) -> CardDimensions:
    return replace(
        DEFAULT_DIMENSIONS,
        width=max(0, options.width),
        height=options.height,
        border_radius=options.border_radius,
    )


def build_render_context(options: CardOptions | None = None) -> RenderContext:
    options = options or CardOptions()
    render_id = derive_render_id(options)
    gradient_id = f"bg-gradient-{render_id}"

    theme = resolve_theme(options.theme)
    dimensions = build_dimensions(options)
    background = parse_background(theme.background, gradient_id)

    colors = {name: normalize_color(getattr(theme, name)) for name in THEME_FIELDS}
    colors["background"] = background.fill

    # Order matters: fire follows the ring override unless fire is set too.
    if options.ring:
        colors["ring"] = options.ring
        if not options.fire:
            colors["fire"] = options.ring
    if options.fire:
        colors["fire"] = options.fire
    for name in _INDEPENDENT_OVERRIDES:
        value = getattr(options, name)
        if value:
            colors[name] = value
    if options.background:
        background = parse_background(options.background, gradient_id)
        colors["background"] = background.fill

    return RenderContext(
        theme=theme,
        background=background,
        dimensions=dimensions,
        colors=ColorSet(**colors),
        render_id=render_id,
    )
