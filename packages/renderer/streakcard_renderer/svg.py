"""SVG element primitives and the outer document wrapper."""

from __future__ import annotations

from xml.sax.saxutils import escape

from .models import RenderContext

FONT_FAMILY = '"Segoe UI", Ubuntu, sans-serif'

FIRE_ICON_PATH = (
    "M 1.5 0.67 C 1.5 0.67 2.24 3.32 2.24 5.47 C 2.24 7.53 0.89 9.2 -1.17 9.2 C -3.23 9.2 -4.79 7.53 -4.79 5.47 "
    "L -4.76 5.11 C -6.78 7.51 -8 10.62 -8 13.99 C -8 18.41 -4.42 22 0 22 C 4.42 22 8 18.41 8 13.99 "
    "C 8 8.6 5.41 3.79 1.5 0.67 Z M -0.29 19 C -2.07 19 -3.51 17.6 -3.51 15.86 C -3.51 14.24 -2.46 13.1 -0.7 12.74 "
    "C 1.07 12.38 2.9 11.53 3.92 10.16 C 4.31 11.45 4.51 12.81 4.51 14.2 C 4.51 16.85 2.36 19 -0.29 19 Z"
)

FADE_DURATION_S = 0.5
CURRENT_STREAK_DURATION_S = 0.6

KEYFRAMES = """
    <style>
      @keyframes currstreak {
        0% { font-size: 3px; opacity: 0.2; }
        80% { font-size: 34px; opacity: 1; }
        100% { font-size: 28px; opacity: 1; }
      }
      @keyframes fadein {
        0% { opacity: 0; }
        100% { opacity: 1; }
      }
    </style>"""

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(text: str) -> str:
    return escape(text, _QUOTE_ENTITIES)


def fmt(value: float) -> str:
    """Compact number text for attributes: 165.0 -> "165", 82.5 -> "82.5"."""
    text = f"{float(value):.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _style_attr(style: str) -> str:
    return f" style='{style}'" if style else ""


def fade_style(delay: float, animate: bool) -> str:
    if not animate:
        return ""
    return f"opacity: 0; animation: fadein {FADE_DURATION_S}s linear forwards {fmt(delay)}s"


def render_text(
    text: str,
    x: float,
    y: float,
    fill: str,
    font_size: int = 14,
    font_weight: int = 400,
    text_anchor: str = "middle",
    animation_delay: float = 0,
    animate: bool = True,
) -> str:
    return (
        f"<text x='{fmt(x)}' y='{fmt(y)}' stroke-width='0' text-anchor='{text_anchor}' fill='{escape_xml(fill)}' "
        f"stroke='none' font-family='{escape_xml(FONT_FAMILY)}' font-weight='{font_weight}' font-size='{font_size}px' "
        f"font-style='normal'{_style_attr(fade_style(animation_delay, animate))}>{escape_xml(text)}</text>"
    )


def render_streak_number(value: str, x: float, y: float, fill: str, animate: bool = True) -> str:
    style = f"animation: currstreak {CURRENT_STREAK_DURATION_S}s linear forwards" if animate else ""
    return (
        f"<text x='{fmt(x)}' y='{fmt(y)}' stroke-width='0' text-anchor='middle' fill='{escape_xml(fill)}' "
        f"stroke='none' font-family='{escape_xml(FONT_FAMILY)}' font-weight='700' font-size='28px' "
        f"font-style='normal'{_style_attr(style)}>{escape_xml(value)}</text>"
    )


def render_line(x1: float, y1: float, x2: float, y2: float, stroke: str, stroke_width: float = 1) -> str:
    return (
        f"<line x1='{fmt(x1)}' y1='{fmt(y1)}' x2='{fmt(x2)}' y2='{fmt(y2)}' vector-effect='non-scaling-stroke' "
        f"stroke-width='{fmt(stroke_width)}' stroke='{escape_xml(stroke)}' stroke-linejoin='miter' "
        f"stroke-linecap='square' stroke-miterlimit='3'/>"
    )


def render_ring_mask(mask_id: str, width: float, height: float, cx: float, cy: float) -> str:
    return (
        "<defs>\n"
        f"    <mask id='{mask_id}'>\n"
        f"      <rect x='0' y='0' width='{fmt(width)}' height='{fmt(height)}' fill='white'/>\n"
        f"      <ellipse cx='{fmt(cx)}' cy='{fmt(cy)}' rx='13' ry='18' fill='black'/>\n"
        "    </mask>\n"
        "  </defs>"
    )


def render_ring(
    cx: float,
    cy: float,
    radius: float,
    color: str,
    mask_id: str,
    stroke_cap: str = "round",
    animation_delay: float = 0.4,
    animate: bool = True,
) -> str:
    return (
        f"<g{_style_attr(fade_style(animation_delay, animate))}>\n"
        f"    <circle cx='{fmt(cx)}' cy='{fmt(cy)}' r='{fmt(radius)}' fill='none' stroke='{escape_xml(color)}' "
        f"stroke-width='5' stroke-linecap='{stroke_cap}' mask='url(#{mask_id})'/>\n"
        "  </g>"
    )


def render_fire_icon(x: float, y: float, color: str, animation_delay: float = 0.6, animate: bool = True) -> str:
    return (
        f"<g{_style_attr(fade_style(animation_delay, animate))}>\n"
        f"    <g transform='translate({fmt(x)}, {fmt(y)})' stroke-opacity='0'>\n"
        "      <path d='M -12 -0.5 L 15 -0.5 L 15 23.5 L -12 23.5 L -12 -0.5 Z' fill='none'/>\n"
        f"      <path d='{FIRE_ICON_PATH}' fill='{escape_xml(color)}' stroke-opacity='0'/>\n"
        "    </g>\n"
        "  </g>"
    )


def render_background(ctx: RenderContext, hide_border: bool = False) -> str:
    dims = ctx.dimensions
    if hide_border:
        stroke_attrs = "stroke='none' stroke-width='0'"
    else:
        stroke_attrs = f"stroke='{escape_xml(ctx.colors.border)}' stroke-width='1'"
    return (
        f"<rect x='0.5' y='0.5' rx='{fmt(dims.border_radius)}' ry='{fmt(dims.border_radius)}' "
        f"width='{fmt(max(dims.width - 1, 0))}' height='{fmt(max(dims.height - 1, 0))}' "
        f"fill='{escape_xml(ctx.background.fill)}' {stroke_attrs}/>"
    )


def render_svg_document(
    ctx: RenderContext,
    content: str,
    animate: bool = True,
    hide_border: bool = False,
    direction: str = "ltr",
) -> str:
    dims = ctx.dimensions
    gradient_defs = f"\n  {ctx.background.defs}" if ctx.background.defs else ""
    styles = KEYFRAMES if animate else ""
    return (
        "<svg xmlns='http://www.w3.org/2000/svg' xmlns:xlink='http://www.w3.org/1999/xlink' "
        f"style='isolation: isolate' viewBox='0 0 {fmt(dims.width)} {fmt(dims.height)}' "
        f"width='{fmt(dims.width)}px' height='{fmt(dims.height)}px' direction='{direction}'>"
        f"{styles}\n"
        "  <defs>\n"
        f"    <clipPath id='{ctx.clip_id}'>\n"
        f"      <rect width='{fmt(dims.width)}' height='{fmt(dims.height)}' rx='{fmt(dims.border_radius)}'/>\n"
        f"    </clipPath>\n"
        f"  </defs>{gradient_defs}\n"
        f"  <g clip-path='url(#{ctx.clip_id})'>\n"
        "    <g style='isolation: isolate'>\n"
        f"      {render_background(ctx, hide_border)}\n"
        "    </g>\n"
        f"    {content}\n"
        "  </g>\n"
        "</svg>\n"
    )
