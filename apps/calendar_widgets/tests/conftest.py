from __future__ import annotations

from collections.abc import Generator

import pytest

from calendar_widgets.core.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for name in (
        "CALENDAR_DEFAULT_LOCALE",
        "CALENDAR_DATE_LOCALE",
        "CALENDAR_MIN_YEAR",
        "CALENDAR_MAX_YEAR",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()
