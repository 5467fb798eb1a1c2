"""Calendar year generation with locale-specific month names."""

from calendar_widgets.api.calendar_year import get_calendar_year
from calendar_widgets.application.schemas.calendar_year import (
    CalendarErrorResponse,
    CalendarYear,
    MonthRecord,
)
from calendar_widgets.application.use_cases.build_calendar_year import (
    BuildCalendarYearUseCase,
)
from calendar_widgets.domain.date_format import format_date, list_days_in_month
from calendar_widgets.domain.errors import (
    DomainError,
    InvalidYearError,
    UnsupportedLocaleError,
)
from calendar_widgets.domain.locale import LOCALE, month_names, supported_locales
from calendar_widgets.domain.month_days import get_days_in_month, is_leap_year
from calendar_widgets.domain.year_validation import is_valid_year

locale = LOCALE

__all__ = [
    "LOCALE",
    "BuildCalendarYearUseCase",
    "CalendarErrorResponse",
    "CalendarYear",
    "DomainError",
    "InvalidYearError",
    "MonthRecord",
    "UnsupportedLocaleError",
    "format_date",
    "get_calendar_year",
    "get_days_in_month",
    "is_leap_year",
    "is_valid_year",
    "list_days_in_month",
    "locale",
    "month_names",
    "supported_locales",
]
