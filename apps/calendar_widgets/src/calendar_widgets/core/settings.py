"""Calendar settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalendarSettings(BaseSettings):
    """Runtime defaults for calendar generation and date formatting."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_locale: str = Field(default="en", alias="CALENDAR_DEFAULT_LOCALE")
    date_locale: str = Field(default="en-US", alias="CALENDAR_DATE_LOCALE")
    min_year: int = Field(default=1900, alias="CALENDAR_MIN_YEAR", ge=1000)
    max_year: int = Field(default=2100, alias="CALENDAR_MAX_YEAR", le=9999)

    @model_validator(mode="after")
    def _check_year_bounds(self) -> "CalendarSettings":
        if self.min_year > self.max_year:
            msg = "CALENDAR_MIN_YEAR must not be greater than CALENDAR_MAX_YEAR."
            raise ValueError(msg)
        return self


@lru_cache(maxsize=1)
def get_settings() -> CalendarSettings:
    """Return cached settings instance for the current process."""

    return CalendarSettings()
