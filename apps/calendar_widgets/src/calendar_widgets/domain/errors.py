"""Domain exceptions raised by calendar generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable calendar failures."""

    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidYearError(DomainError):
    """Raised when a purported year is not accepted by the year validator."""

    def __init__(
        self,
        year: object,
        *,
        min_year: int = 1900,
        max_year: int = 2100,
    ) -> None:
        super().__init__(
            code="INVALID_YEAR",
            message=(
                "The argument passed to `calendar('YYYY')` must be a valid year "
                f"between {min_year} and {max_year}. You passed {year}."
            ),
            details={"year": str(year), "min_year": min_year, "max_year": max_year},
        )


class UnsupportedLocaleError(DomainError):
    """Raised when no month-name table exists for a locale code."""

    def __init__(self, locale: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            code="UNSUPPORTED_LOCALE",
            message=(
                f"Locale {locale!r} has no month names. "
                f"Use one of: {', '.join(supported)}."
            ),
            details={"locale": locale, "supported": list(supported)},
        )
