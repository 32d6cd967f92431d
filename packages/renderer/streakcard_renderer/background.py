"""Background specifier parsing: solid colours, transparency and linear gradients.

A background is one of three forms:

* a hex colour, with or without ``#`` (``"282A36"``, ``"#282A36"``);
* a transparent colour (``"transparent"``, ``"#0000"``, any hex colour whose
  alpha channel is zero);
* a gradient ``"ANGLE,COLOR1,COLOR2[,...]"`` where the colours are bare hex
  tokens without ``#``.

Nothing here raises on malformed input: a specifier that is not transparent and
not a well-formed gradient is passed through as a solid colour.
"""

from __future__ import annotations

import math
import re

from .models import GradientInfo, GradientStop, ParsedBackground

_TRANSPARENT_LITERALS = frozenset({"#0000", "#00000000", "transparent", "rgba(0,0,0,0)", "rgba(0, 0, 0, 0)"})
_ZERO_ALPHA_RE = re.compile(r"^#(?:[0-9a-f]{3}0|[0-9a-f]{6}00)$")
_GRADIENT_COLOR_RE = re.compile(r"^(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_HEX_COLOR_RE = re.compile(r"^#?(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")

DEFAULT_GRADIENT_ID = "gradient-bg"
FALLBACK_COLOR = "#000000"


def _parse_angle(raw: str) -> float | None:
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def is_transparent(color: str) -> bool:
    normalized = color.strip().lower()
    return normalized in _TRANSPARENT_LITERALS or bool(_ZERO_ALPHA_RE.match(normalized))


def is_gradient(background: str) -> bool:
    parts = background.split(",")
    if len(parts) < 3:
        return False
    if _parse_angle(parts[0]) is None:
        return False
    return all(_GRADIENT_COLOR_RE.match(p.strip()) for p in parts[1:])


def parse_gradient(background: str) -> GradientInfo:
    parts = [p.strip() for p in background.split(",")]
    angle = _parse_angle(parts[0]) or 0.0
    colors = parts[1:]
    count = len(colors)
    stops = tuple(
        GradientStop(color=f"#{color}", offset=50.0 if count == 1 else index / (count - 1) * 100)
        for index, color in enumerate(colors)
    )
    return GradientInfo(angle=angle, stops=stops)


def angle_to_coordinates(angle: float) -> dict[str, str]:
    """Map a CSS-style gradient angle (0 = bottom to top) onto SVG x1/y1/x2/y2."""
    normalized = ((angle % 360) + 360) % 360
    radians = math.radians(normalized - 90)
    dx = math.cos(radians) * 50
    dy = math.sin(radians) * 50
    return {
        "x1": f"{_js_round(50 - dx)}%",
        "y1": f"{_js_round(50 - dy)}%",
        "x2": f"{_js_round(50 + dx)}%",
        "y2": f"{_js_round(50 + dy)}%",
    }


def _js_round(value: float) -> int:
    # Half-up rounding; round() would send 0.5 to 0 and 2.5 to 2.
    return int(math.floor(value + 0.5))


def _fmt_offset(offset: float) -> str:
    return f"{offset:g}" if offset == int(offset) else f"{offset:.10g}"


def generate_gradient_defs(gradient_id: str, info: GradientInfo) -> str:
    coords = angle_to_coordinates(info.angle)
    stops = "\n      ".join(
        f'<stop offset="{_fmt_offset(stop.offset)}%" stop-color="{stop.color}" stop-opacity="1"/>' for stop in info.stops
    )
    return (
        "<defs>\n"
        f'    <linearGradient id="{gradient_id}" x1="{coords["x1"]}" y1="{coords["y1"]}" '
        f'x2="{coords["x2"]}" y2="{coords["y2"]}">\n'
        f"      {stops}\n"
        "    </linearGradient>\n"
        "  </defs>"
    )


def parse_background(background: str, gradient_id: str = DEFAULT_GRADIENT_ID) -> ParsedBackground:
    if is_transparent(background):
        return ParsedBackground(type="transparent", defs="", fill="transparent")

    if is_gradient(background):
        defs = generate_gradient_defs(gradient_id, parse_gradient(background))
        return ParsedBackground(type="gradient", defs=defs, fill=f"url(#{gradient_id})")

    return ParsedBackground(type="solid", defs="", fill=normalize_color(background))


def normalize_color(color: str | None) -> str:
    if not color:
        return FALLBACK_COLOR
    return color if color.startswith("#") else f"#{color}"


def is_valid_hex_color(color: str) -> bool:
    return bool(_HEX_COLOR_RE.match(color))
