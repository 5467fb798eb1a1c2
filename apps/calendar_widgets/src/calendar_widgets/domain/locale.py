"""Static month-name tables and numeric date patterns per locale."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from calendar_widgets.domain.errors import UnsupportedLocaleError

MONTHS_PER_YEAR = 12

_EN_MONTHS = (
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

_ES_MONTHS = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)

LOCALE: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "en": _EN_MONTHS,
        "es": _ES_MONTHS,
    }
)



def check_month_tables(tables: Mapping[str, tuple[str, ...]]) -> None:
    """Raise when a locale does not define exactly one name per month."""

    for code, names in tables.items():
        if len(names) != MONTHS_PER_YEAR:
            msg = f"Locale {code!r} must define exactly {MONTHS_PER_YEAR} month names."
            raise RuntimeError(msg)


check_month_tables(LOCALE)

# Numeric date layouts keyed by lower-cased locale tag or language subtag.
DATE_PATTERNS: Mapping[str, str] = MappingProxyType(
    {
        "en": "{month}/{day}/{year}",
        "en-us": "{month}/{day}/{year}",
        "en-gb": "{day}/{month}/{year}",
        "en-au": "{day}/{month}/{year}",
        "en-ca": "{year}-{month}-{day}",
        "es": "{day}/{month}/{year}",
        "de": "{day}.{month}.{year}",
        "fr": "{day}/{month}/{year}",
        "it": "{day}/{month}/{year}",
        "pt": "{day}/{month}/{year}",
        "nl": "{day}-{month}-{year}",
        "sv": "{year}-{month}-{day}",
        "ja": "{year}/{month}/{day}",
        "zh": "{year}/{month}/{day}",
    }
)


def supported_locales() -> tuple[str, ...]:
    """Return locale codes that have month-name tables, in declaration order."""

    return tuple(LOCALE)


def month_names(locale: str) -> tuple[str, ...]:
    """Return the 12 month names for a locale code in calendar order."""

    names = LOCALE.get(locale)
    if names is None:
        raise UnsupportedLocaleError(locale, supported_locales())
    return names


def _normalize_tag(locale_tag: str) -> str:
    return locale_tag.strip().replace("_", "-").lower()


def resolve_date_pattern(locale_tag: str) -> str | None:
    """Return the date pattern for a tag, trying the full tag then its language."""

    normalized = _normalize_tag(locale_tag)
    pattern = DATE_PATTERNS.get(normalized)
    if pattern is not None:
        return pattern
    language = normalized.split("-", maxsplit=1)[0]
    return DATE_PATTERNS.get(language)
