"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Literal

BackgroundType = Literal["solid", "transparent", "gradient"]
NumberFormat = Literal["short", "full"]
StrokeType = Literal["round", "butt"]


@dataclass(frozen=True)
class ThemeColors:
    background: str
    border: str
    stroke: str
    ring: str
    fire: str
    curr_streak_num: str
    side_nums: str
    curr_streak_label: str
    side_labels: str
    dates: str
    excluded_days_label: str


THEME_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(ThemeColors))


@dataclass(frozen=True)
class GradientStop:
    color: str
    offset: float


@dataclass(frozen=True)
class GradientInfo:
    angle: float
    stops: tuple[GradientStop, ...]


@dataclass(frozen=True)
class ParsedBackground:
    type: BackgroundType
    defs: str
    fill: str


@dataclass(frozen=True)
class CardDimensions:
    width: float = 495
    height: float = 195
    border_radius: float = 4.5
    padding: float = 25


DEFAULT_DIMENSIONS = CardDimensions()


@dataclass(frozen=True)
class StreakCardData:
    username: str
    total_contributions: int
    current_streak: int
    longest_streak: int
    streak_start_date: str
    streak_end_date: str
    first_contribution_date: str
    longest_streak_start_date: str | None = None
    longest_streak_end_date: str | None = None


@dataclass(frozen=True)
class CardOptions:
    """Request configuration for one card.

    Colour overrides left as ``None`` (or empty) fall through to the theme.
    """

    theme: str = "default"
    width: float = 495
    height: float = 195
    border_radius: float = 4.5
    locale: str = "en"
    date_format: str | None = None
    number_format: NumberFormat = "full"
    animate: bool = True
    hide_border: bool = False
    stroke_type: StrokeType = "round"
    fire: str | None = None
    ring: str | None = None
    curr_streak_num: str | None = None
    side_nums: str | None = None
    curr_streak_label: str | None = None
    side_labels: str | None = None
    dates: str | None = None
    background: str | None = None
    stroke: str | None = None
    render_id: str | None = None


OVERRIDE_FIELDS: tuple[str, ...] = (
    "fire",
    "ring",
    "curr_streak_num",
    "side_nums",
    "curr_streak_label",
    "side_labels",
    "dates",
    "background",
    "stroke",
)


@dataclass(frozen=True)
class ColorSet:
    background: str
    border: str
    stroke: str
    ring: str
    fire: str
    curr_streak_num: str
    side_nums: str
    curr_streak_label: str
    side_labels: str
    dates: str
    excluded_days_label: str


@dataclass(frozen=True)
class RenderContext:
    theme: ThemeColors
    background: ParsedBackground
    dimensions: CardDimensions
    colors: ColorSet
    render_id: str

    @property
    def gradient_id(self) -> str:
        return f"bg-gradient-{self.render_id}"

    @property
    def clip_id(self) -> str:
        return f"outer-rectangle-{self.render_id}"

    @property
    def mask_id(self) -> str:
        return f"ring-mask-{self.render_id}"
