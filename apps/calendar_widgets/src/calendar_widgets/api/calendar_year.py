"""Calendar year handler returning plain payloads instead of raising."""

from __future__ import annotations

import logging
from typing import Any

from calendar_widgets.application.schemas.calendar_year import (
    CalendarErrorResponse,
    ErrorBody,
)
from calendar_widgets.application.use_cases.build_calendar_year import (
    BuildCalendarYearUseCase,
)
from calendar_widgets.domain.errors import DomainError

logger = logging.getLogger(__name__)


def error_payload(message: str) -> dict[str, Any]:
    """Build the ``{"error": {"body": ...}}`` value for a rejected request."""
    return CalendarErrorResponse(error=ErrorBody(body=message)).model_dump()


def get_calendar_year(
    year: object,
    locale: str | None = None,
    *,
    date_locale: str | None = None,
) -> dict[str, Any]:
    """Return month records keyed by lower-cased month name, or an error value.

    Callers must check for an ``error`` key before reading month entries.
    """
    try:
        calendar_year = BuildCalendarYearUseCase().execute(
            year,
            locale=locale,
            date_locale=date_locale,
        )
    except DomainError as error:
        logger.warning(
            "calendar_year_rejected",
            extra={"error_code": error.code, "details": error.details},
        )
        return error_payload(error.message)

    return calendar_year.model_dump()
