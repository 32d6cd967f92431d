"""Raster palette sheet: one row per theme, one swatch per colour field."""

from __future__ import annotations

from io import BytesIO

from PIL import Image, ImageColor, ImageDraw, ImageFont

from .background import is_gradient, is_transparent, parse_gradient
from .models import THEME_FIELDS, ThemeColors
from .theme_resolver import resolve_theme_with_status

ROW_HEIGHT = 44
LABEL_WIDTH = 190
SWATCH_SIZE = 32
SWATCH_GAP = 8
MARGIN = 16
SHEET_BG = (250, 250, 250)
TEXT_COLOR = (30, 30, 30)
_CHECKER = ((204, 204, 204), (255, 255, 255))


def _font(size: int):
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size)
    except Exception:
        try:
            return ImageFont.truetype("Arial.ttf", size)
        except Exception:
            return ImageFont.load_default()


def _rgb(color: str) -> tuple[int, int, int] | None:
    value = color if color.startswith("#") else f"#{color}"
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError:
        return None
    return rgb[0], rgb[1], rgb[2]


def _paint_checker(image: Image.Image, box: tuple[int, int, int, int], cell: int = 8) -> None:
    draw = ImageDraw.Draw(image)
    x0, y0, x1, y1 = box
    for y in range(y0, y1, cell):
        for x in range(x0, x1, cell):
            fill = _CHECKER[((x - x0) // cell + (y - y0) // cell) % 2]
            draw.rectangle((x, y, min(x + cell, x1) - 1, min(y + cell, y1) - 1), fill=fill)


def _paint_gradient(image: Image.Image, box: tuple[int, int, int, int], spec: str) -> None:
    stops = [rgb for rgb in (_rgb(s.color) for s in parse_gradient(spec).stops) if rgb is not None]
    if not stops:
        return
    if len(stops) == 1:
        stops = stops * 2
    x0, y0, x1, y1 = box
    width = max(x1 - x0 - 1, 1)
    segments = len(stops) - 1
    pix = image.load()
    for x in range(x0, x1):
        t = (x - x0) / width * segments
        index = min(int(t), segments - 1)
        local = t - index
        start, end = stops[index], stops[index + 1]
        color = tuple(int(start[c] * (1 - local) + end[c] * local) for c in range(3))
        for y in range(y0, y1):
            pix[x, y] = color


def _paint_swatch(image: Image.Image, box: tuple[int, int, int, int], color: str) -> None:
    draw = ImageDraw.Draw(image)
    if is_transparent(color):
        _paint_checker(image, box)
    elif is_gradient(color):
        _paint_gradient(image, box, color)
    else:
        rgb = _rgb(color)
        if rgb is None:
            _paint_checker(image, box)
            draw.line((box[0], box[3] - 1, box[2] - 1, box[1]), fill=(220, 0, 0), width=2)
        else:
            draw.rectangle((box[0], box[1], box[2] - 1, box[3] - 1), fill=rgb)
    draw.rectangle((box[0], box[1], box[2] - 1, box[3] - 1), outline=(120, 120, 120), width=1)


def render_palette_sheet(theme_names: list[str]) -> Image.Image:
    width = MARGIN * 2 + LABEL_WIDTH + len(THEME_FIELDS) * (SWATCH_SIZE + SWATCH_GAP)
    height = MARGIN * 2 + max(len(theme_names), 1) * ROW_HEIGHT
    image = Image.new("RGB", (width, height), SHEET_BG)
    draw = ImageDraw.Draw(image)
    font = _font(14)

    for row, name in enumerate(theme_names):
        resolution = resolve_theme_with_status(name)
        theme: ThemeColors = resolution.theme
        top = MARGIN + row * ROW_HEIGHT
        label = resolution.resolved_name if resolution.found else f"{name} (default)"
        draw.text((MARGIN, top + (SWATCH_SIZE - 14) // 2), label, font=font, fill=TEXT_COLOR)

        for col, field_name in enumerate(THEME_FIELDS):
            left = MARGIN + LABEL_WIDTH + col * (SWATCH_SIZE + SWATCH_GAP)
            _paint_swatch(image, (left, top, left + SWATCH_SIZE, top + SWATCH_SIZE), getattr(theme, field_name))

    return image


def palette_sheet_png(theme_names: list[str]) -> bytes:
    buf = BytesIO()
    render_palette_sheet(theme_names).save(buf, format="PNG")
    return buf.getvalue()
