"""Use case that assembles a full calendar year."""

from __future__ import annotations

import logging

from calendar_widgets.application.schemas.calendar_year import (
    CalendarYear,
    MonthRecord,
)
from calendar_widgets.core.settings import CalendarSettings, get_settings
from calendar_widgets.domain.date_format import list_days_in_month
from calendar_widgets.domain.errors import InvalidYearError
from calendar_widgets.domain.locale import month_names
from calendar_widgets.domain.month_days import get_days_in_month
from calendar_widgets.domain.year_validation import coerce_year, is_valid_year

logger = logging.getLogger(__name__)


class BuildCalendarYearUseCase:
    """Build per-month day counts and day listings for one year."""

    def __init__(self, settings: CalendarSettings | None = None) -> None:
        self._settings = settings or get_settings()

    def execute(
        self,
        year: object,
        locale: str | None = None,
        date_locale: str | None = None,
    ) -> CalendarYear:
        """Return the calendar year or raise a domain error for bad input."""
        coerced = coerce_year(year)
        if coerced is None or not is_valid_year(coerced, settings=self._settings):
            raise InvalidYearError(
                year,
                min_year=self._settings.min_year,
                max_year=self._settings.max_year,
            )

        locale_code = locale or self._settings.default_locale
        names = month_names(locale_code)

        months: dict[str, MonthRecord] = {}
        for month, name in enumerate(names, start=1):
            months[name.lower()] = MonthRecord(
                count=get_days_in_month(coerced, month),
                collection=list_days_in_month(month, coerced, date_locale),
            )
        calendar_year = CalendarYear(months)

        logger.info(
            "calendar_year_generated",
            extra={"year": coerced, "locale": locale_code},
        )
        return calendar_year
