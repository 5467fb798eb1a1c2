"""Month length helpers built on proleptic Gregorian calendar arithmetic."""

from __future__ import annotations

import calendar
from datetime import date, timedelta


def is_leap_year(year: int) -> bool:
    """Return whether a year has a 29-day February."""

    return calendar.isleap(year)


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) with months outside 1..12 rolled into adjacent years."""

    absolute_month = (year - 1) * 12 + (month - 1)
    return absolute_month // 12 + 1, absolute_month % 12 + 1


def normalize_date(year: int, month: int, day: int) -> date:
    """Return the date for possibly out-of-range components.

    Months outside 1..12 roll into adjacent years and days outside the month
    roll into adjacent months, so day 0 is the last day of the previous month.
    """

    target_year, target_month = normalize_month(year, month)
    first_day = date(year=target_year, month=target_month, day=1)
    return first_day + timedelta(days=day - 1)


def get_days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month, taking leap years into account."""

    target_year, target_month = normalize_month(year, month)
    _, month_last_day = calendar.monthrange(target_year, target_month)
    return month_last_day
