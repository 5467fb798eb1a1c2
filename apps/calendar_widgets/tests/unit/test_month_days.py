"""Unit tests for month length helpers."""

from __future__ import annotations

from datetime import date

import pytest

from calendar_widgets.domain.month_days import (
    get_days_in_month,
    is_leap_year,
    normalize_date,
    normalize_month,
)


@pytest.mark.parametrize(
    ("year", "month", "expected"),
    [
        (2024, 2, 29),
        (2023, 2, 28),
        (1900, 2, 28),
        (2000, 2, 29),
        (2100, 2, 28),
        (2023, 1, 31),
        (2023, 4, 30),
        (2023, 12, 31),
    ],
)
def test_get_days_in_month(year: int, month: int, expected: int) -> None:
    assert get_days_in_month(year, month) == expected


def test_leap_year_rule_covers_century_exceptions() -> None:
    assert is_leap_year(2024)
    assert is_leap_year(2000)
    assert not is_leap_year(1900)
    assert not is_leap_year(2023)
    assert not is_leap_year(2100)


def test_month_overflow_rolls_into_adjacent_years() -> None:
    assert get_days_in_month(2023, 13) == 31
    assert get_days_in_month(2023, 14) == 29
    assert get_days_in_month(2023, 0) == 31


def test_normalize_date_treats_day_zero_as_previous_month_end() -> None:
    assert normalize_date(2024, 3, 0) == date(2024, 2, 29)
    assert normalize_date(2023, 1, 0) == date(2022, 12, 31)
    assert normalize_date(2023, 1, 32) == date(2023, 2, 1)
    assert normalize_date(2023, 13, 1) == date(2024, 1, 1)


def test_get_days_in_month_handles_last_supported_month() -> None:
    assert get_days_in_month(9999, 12) == 31


def test_get_days_in_month_handles_large_month_overflow() -> None:
    # 2023 + 8333 years, month 4
    assert get_days_in_month(2023, 100000) == 30


def test_normalize_month_rolls_across_years() -> None:
    assert normalize_month(2023, 13) == (2024, 1)
    assert normalize_month(2023, 0) == (2022, 12)
    assert normalize_month(2023, -11) == (2022, 1)
