"""Locale-aware numeric date formatting and per-month day listings."""

from __future__ import annotations

import logging
from datetime import date

from calendar_widgets.core.settings import get_settings
from calendar_widgets.domain.locale import resolve_date_pattern
from calendar_widgets.domain.month_days import get_days_in_month, normalize_date

DEFAULT_DATE_PATTERN = "{month}/{day}/{year}"

logger = logging.getLogger(__name__)


def _pattern_for(locale_tag: str | None) -> str:
    default_tag = get_settings().date_locale
    default_pattern = resolve_date_pattern(default_tag) or DEFAULT_DATE_PATTERN
    if locale_tag is None:
        return default_pattern

    pattern = resolve_date_pattern(locale_tag)
    if pattern is None:
        logger.warning(
            "date_locale_fallback",
            extra={"locale_tag": locale_tag, "fallback_tag": default_tag},
        )
        return default_pattern
    return pattern


def _render(value: date, pattern: str) -> str:
    return pattern.format(
        month=f"{value.month:02d}",
        day=f"{value.day:02d}",
        year=f"{value.year:04d}",
    )


def format_date(
    month: int,
    day: int,
    year: int,
    locale_tag: str | None = None,
) -> str:
    """Format a date as zero-padded numbers in the locale's order.

    When locale_tag is omitted the configured date locale is used, which
    defaults to ``en-US`` (``MM/DD/YYYY``).
    """

    return _render(normalize_date(year, month, day), _pattern_for(locale_tag))


def list_days_in_month(
    month: int,
    year: int,
    locale_tag: str | None = None,
) -> list[str]:
    """Return one formatted date string per day of the month, in day order."""

    days_in_month = get_days_in_month(year, month)
    pattern = _pattern_for(locale_tag)
    return [
        _render(normalize_date(year, month, day), pattern)
        for day in range(1, days_in_month + 1)
    ]
