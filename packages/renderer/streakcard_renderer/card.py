"""Streak card composer: three-section layout over a themed background."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date

from .context import build_render_context
from .formatting import PRESENT, format_date_range, format_number
from .models import CardOptions, RenderContext, StreakCardData
from .svg import (
    render_fire_icon,
    render_line,
    render_ring,
    render_ring_mask,
    render_streak_number,
    render_svg_document,
    render_text,
)
from .translations import TranslationStrings, get_translations

logger = logging.getLogger("streakcard.renderer")

# Vertical anchors are laid out for this height and shifted for taller or shorter cards.
REFERENCE_HEIGHT = 195

SIDE_NUMBER_Y = 79
SIDE_LABEL_Y = 130
SIDE_DATE_Y = 158
RING_CENTER_Y = 72
RING_RADIUS = 40
FIRE_ICON_Y = 18
CENTER_NUMBER_Y = 79
CENTER_LABEL_Y = 130
CENTER_DATE_Y = 158
SEPARATOR_TOP_Y = 28
SEPARATOR_BOTTOM_Y = 170


@dataclass(frozen=True)
class AnimationDelays:
    ring: float = 0.4
    fire: float = 0.6
    curr_label: float = 0.9
    curr_dates: float = 0.9
    side_numbers: float = 0.5
    side_labels: float = 0.65
    side_dates: float = 0.8


DELAYS = AnimationDelays()


@dataclass(frozen=True)
class CardLayout:
    width: float
    height: float

    @property
    def offset(self) -> float:
        return (self.height - REFERENCE_HEIGHT) / 2

    @property
    def section_width(self) -> float:
        return self.width / 3

    @property
    def left_x(self) -> float:
        return self.section_width / 2

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def right_x(self) -> float:
        return self.width - self.section_width / 2

    def y(self, reference_y: float) -> float:
        return reference_y + self.offset


class StreakCardRenderer:
    """Composes the streak card markup for one statistics record."""

    def __init__(self, today: date | None = None) -> None:
        self.today = today

    def render(self, data: StreakCardData, options: CardOptions | None = None) -> str:
        options = options or CardOptions()
        ctx = build_render_context(options)
        translations = get_translations(options.locale)
        layout = CardLayout(width=ctx.dimensions.width, height=ctx.dimensions.height)

        logger.debug(
            "rendering card user=%s theme=%s background=%s size=%sx%s",
            data.username,
            options.theme,
            ctx.background.type,
            layout.width,
            layout.height,
        )

        parts = [render_ring_mask(ctx.mask_id, layout.width, layout.height, layout.center_x, layout.y(FIRE_ICON_Y + 18))]
        parts.extend(self._separators(ctx, layout))
        parts.extend(self._left_section(ctx, layout, data, options, translations))
        parts.extend(self._center_section(ctx, layout, data, options, translations))
        parts.extend(self._right_section(ctx, layout, data, options, translations))

        return render_svg_document(
            ctx,
            "\n    ".join(parts),
            animate=options.animate,
            hide_border=options.hide_border,
            direction="rtl" if translations.rtl else "ltr",
        )

    def _date_range(self, start: str, end: str, options: CardOptions, translations: TranslationStrings) -> str:
        return format_date_range(
            start,
            end,
            locale=options.locale,
            present_label=translations.present,
            date_format=options.date_format,
            today=self.today,
        )

    @staticmethod
    def _total(value: int, options: CardOptions) -> str:
        return format_number(value, options.locale, short=options.number_format == "short")

    def _separators(self, ctx: RenderContext, layout: CardLayout) -> list[str]:
        top = layout.y(SEPARATOR_TOP_Y)
        bottom = layout.y(SEPARATOR_BOTTOM_Y)
        left = layout.section_width
        right = layout.width - layout.section_width
        return [
            render_line(left, top, left, bottom, stroke=ctx.colors.stroke),
            render_line(right, top, right, bottom, stroke=ctx.colors.stroke),
        ]

    def _left_section(
        self,
        ctx: RenderContext,
        layout: CardLayout,
        data: StreakCardData,
        options: CardOptions,
        translations: TranslationStrings,
    ) -> list[str]:
        x = layout.left_x
        animate = options.animate
        return [
            render_text(
                self._total(data.total_contributions, options),
                x,
                layout.y(SIDE_NUMBER_Y),
                fill=ctx.colors.side_nums,
                font_size=28,
                font_weight=700,
                animation_delay=DELAYS.side_numbers,
                animate=animate,
            ),
            render_text(
                translations.total_contributions,
                x,
                layout.y(SIDE_LABEL_Y),
                fill=ctx.colors.side_labels,
                animation_delay=DELAYS.side_labels,
                animate=animate,
            ),
            render_text(
                self._date_range(data.first_contribution_date, PRESENT, options, translations),
                x,
                layout.y(SIDE_DATE_Y),
                fill=ctx.colors.dates,
                font_size=12,
                animation_delay=DELAYS.side_dates,
                animate=animate,
            ),
        ]

    def _center_section(
        self,
        ctx: RenderContext,
        layout: CardLayout,
        data: StreakCardData,
        options: CardOptions,
        translations: TranslationStrings,
    ) -> list[str]:
        x = layout.center_x
        animate = options.animate
        stroke_cap = "butt" if options.stroke_type == "butt" else "round"
        return [
            render_ring(
                x,
                layout.y(RING_CENTER_Y),
                RING_RADIUS,
                color=ctx.colors.ring,
                mask_id=ctx.mask_id,
                stroke_cap=stroke_cap,
                animation_delay=DELAYS.ring,
                animate=animate,
            ),
            render_fire_icon(x, layout.y(FIRE_ICON_Y), ctx.colors.fire, DELAYS.fire, animate),
            render_streak_number(
                str(data.current_streak),
                x,
                layout.y(CENTER_NUMBER_Y),
                fill=ctx.colors.curr_streak_num,
                animate=animate,
            ),
            render_text(
                translations.current_streak,
                x,
                layout.y(CENTER_LABEL_Y),
                fill=ctx.colors.curr_streak_label,
                animation_delay=DELAYS.curr_label,
                animate=animate,
            ),
            render_text(
                self._date_range(data.streak_start_date, data.streak_end_date, options, translations),
                x,
                layout.y(CENTER_DATE_Y),
                fill=ctx.colors.dates,
                font_size=12,
                animation_delay=DELAYS.curr_dates,
                animate=animate,
            ),
        ]

    def _right_section(
        self,
        ctx: RenderContext,
        layout: CardLayout,
        data: StreakCardData,
        options: CardOptions,
        translations: TranslationStrings,
    ) -> list[str]:
        x = layout.right_x
        animate = options.animate
        out = [
            render_text(
                str(data.longest_streak),
                x,
                layout.y(SIDE_NUMBER_Y),
                fill=ctx.colors.side_nums,
                font_size=28,
                font_weight=700,
                animation_delay=DELAYS.side_numbers,
                animate=animate,
            ),
            render_text(
                translations.longest_streak,
                x,
                layout.y(SIDE_LABEL_Y),
                fill=ctx.colors.side_labels,
                animation_delay=DELAYS.side_labels,
                animate=animate,
            ),
        ]
        if data.longest_streak_start_date and data.longest_streak_end_date:
            out.append(
                render_text(
                    self._date_range(data.longest_streak_start_date, data.longest_streak_end_date, options, translations),
                    x,
                    layout.y(SIDE_DATE_Y),
                    fill=ctx.colors.dates,
                    font_size=12,
                    animation_delay=DELAYS.side_dates,
                    animate=animate,
                )
            )
        return out


def generate_streak_card(data: StreakCardData, options: CardOptions | None = None, today: date | None = None) -> str:
    return StreakCardRenderer(today=today).render(data, options)


def generate_theme_preview(
    data: StreakCardData,
    themes: list[str],
    options: CardOptions | None = None,
    today: date | None = None,
) -> dict[str, str]:
    """Render the same data once per theme name, keyed by the requested name."""
    renderer = StreakCardRenderer(today=today)
    base = options or CardOptions()
    return {name: renderer.render(data, replace(base, theme=name, render_id=None)) for name in themes}
