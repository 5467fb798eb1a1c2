"""Calendar year schemas."""

from calendar_widgets.application.schemas.calendar_year import (
    CalendarErrorResponse,
    CalendarYear,
    ErrorBody,
    MonthRecord,
)

__all__ = [
    "CalendarErrorResponse",
    "CalendarYear",
    "ErrorBody",
    "MonthRecord",
]
