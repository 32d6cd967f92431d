"""Locale-aware date and number formatting for card text."""

from __future__ import annotations

import logging
import re
from datetime import date
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.dates import format_skeleton, get_month_names
from babel.numbers import format_decimal
from dateutil.parser import isoparse

from .translations import get_translations, normalize_locale_code

logger = logging.getLogger("streakcard.renderer")

PRESENT = "Present"

_SHORT_UNITS = ("", "K", "M", "B", "T")
_EN_MONTHS_SHORT = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_EN_MONTHS_WIDE = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_LEADING_DATE_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})")
_OPTIONAL_PART_RE = re.compile(r"\[([^\]]*)\]")


@lru_cache(maxsize=64)
def _babel_locale(locale_code: str) -> Locale | None:
    try:
        return Locale.parse(normalize_locale_code(locale_code))
    except (UnknownLocaleError, ValueError):
        logger.debug("no locale data for %r, using English tables", locale_code)
        return None


def _parse_date(date_string: str) -> tuple[date | None, bool]:
    """Return ``(date, strict)``; ``strict`` is false when only a leading YYYY-MM-DD was readable."""
    try:
        return isoparse(date_string.strip()).date(), True
    except (ValueError, OverflowError):
        pass

    match = _LEADING_DATE_RE.match(date_string)
    if match:
        try:
            return date(*(int(g) for g in match.groups())), False
        except ValueError:
            pass
    return None, False


def _month_name(month: int, width: str, locale: Locale | None) -> str:
    if locale is not None:
        return get_month_names(width, locale=locale)[month]
    table = _EN_MONTHS_SHORT if width == "abbreviated" else _EN_MONTHS_WIDE
    return table[month - 1]


def _english_date(d: date, same_year: bool) -> str:
    month = _EN_MONTHS_SHORT[d.month - 1]
    return f"{month} {d.day}" if same_year else f"{month} {d.day}, {d.year}"


def _format_with_pattern(d: date, pattern: str, locale: Locale | None, same_year: bool) -> str:
    """Expand a PHP-style date pattern such as ``M j[, Y]`` or ``[Y.]n.j``.

    Bracketed text is shown only for dates outside the current year.
    """
    pattern = _OPTIONAL_PART_RE.sub(lambda m: "" if same_year else m.group(1), pattern)

    out: list[str] = []
    escaped = False
    for ch in pattern:
        if escaped:
            out.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == "j":
            out.append(str(d.day))
        elif ch == "d":
            out.append(f"{d.day:02d}")
        elif ch == "n":
            out.append(str(d.month))
        elif ch == "m":
            out.append(f"{d.month:02d}")
        elif ch == "M":
            out.append(_month_name(d.month, "abbreviated", locale))
        elif ch == "F":
            out.append(_month_name(d.month, "wide", locale))
        elif ch == "Y":
            out.append(str(d.year))
        elif ch == "y":
            out.append(f"{d.year % 100:02d}")
        else:
            out.append(ch)
    return "".join(out)


def format_date(
    date_string: str,
    locale: str = "en",
    date_format: str | None = None,
    today: date | None = None,
) -> str:
    """Render a date as "short month + day", adding the year outside the current year.

    ``date_format`` (or the locale's own pattern hint) switches to PHP-style
    pattern expansion. Input that cannot be read as a date is returned as-is.
    """
    parsed, strict = _parse_date(date_string)
    if parsed is None:
        return date_string

    current_year = (today or date.today()).year
    same_year = parsed.year == current_year
    if not strict:
        return _english_date(parsed, same_year)

    babel_locale = _babel_locale(locale)
    pattern = date_format or get_translations(locale).date_format
    if pattern:
        return _format_with_pattern(parsed, pattern, babel_locale, same_year)

    if babel_locale is None:
        return _english_date(parsed, same_year)
    return format_skeleton("MMMd" if same_year else "yMMMd", parsed, locale=babel_locale)


def format_date_range(
    start: str,
    end: str,
    locale: str = "en",
    present_label: str | None = None,
    date_format: str | None = None,
    today: date | None = None,
) -> str:
    start_text = format_date(start, locale, date_format, today)
    if end == PRESENT:
        end_text = present_label if present_label is not None else get_translations(locale).present
    else:
        end_text = format_date(end, locale, date_format, today)

    if start_text == end_text:
        return start_text
    return f"{start_text} - {end_text}"


def format_number(num: float, locale: str = "en", short: bool = False) -> str:
    if short:
        value = float(num)
        unit = 0
        while value >= 1000 and unit < len(_SHORT_UNITS) - 1:
            value /= 1000
            unit += 1
        text = f"{value:.1f}"
        if text.endswith(".0"):
            text = text[:-2]
        return text + _SHORT_UNITS[unit]

    babel_locale = _babel_locale(locale)
    if babel_locale is None:
        return f"{num:,}"
    return format_decimal(num, locale=babel_locale)
