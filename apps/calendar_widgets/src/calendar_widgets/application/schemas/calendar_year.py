"""Schemas for generated calendar years and their error envelope."""

from __future__ import annotations

from pydantic import BaseModel, Field, RootModel, model_validator


class MonthRecord(BaseModel):
    """Day count and formatted day list for one month."""

    count: int = Field(ge=1)
    collection: list[str]

    @model_validator(mode="after")
    def _collection_matches_count(self) -> MonthRecord:
        if len(self.collection) != self.count:
            msg = "collection must contain exactly one entry per day."
            raise ValueError(msg)
        return self


class CalendarYear(RootModel[dict[str, MonthRecord]]):
    """Month records keyed by lower-cased month name, in calendar order."""

    def month_keys(self) -> list[str]:
        """Return month keys in insertion (calendar) order."""
        return list(self.root)

    def __getitem__(self, key: str) -> MonthRecord:
        return self.root[key]

    def __len__(self) -> int:
        return len(self.root)


class ErrorBody(BaseModel):
    """Human-readable error payload."""

    body: str


class CalendarErrorResponse(BaseModel):
    """Value returned in place of a calendar year when input is rejected."""

    error: ErrorBody
