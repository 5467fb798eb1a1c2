"""Year validation for calendar generation."""

from __future__ import annotations

import math

from calendar_widgets.core.settings import CalendarSettings, get_settings

YEAR_DIGITS = 4


def coerce_year(value: object) -> int | None:
    """Return value as an integer year, or None when it is not year-like."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return int(text)
    return None


def is_valid_year(year: object, *, settings: CalendarSettings | None = None) -> bool:
    """Return whether year is a 4-digit year inside the configured bounds."""

    coerced = coerce_year(year)
    if coerced is None or len(str(coerced)) != YEAR_DIGITS:
        return False

    bounds = settings or get_settings()
    return bounds.min_year <= coerced <= bounds.max_year
