"""Serializers for transforming domain models into structured records."""

from datetime import date
from typing import Self

from pydantic import BaseModel, ConfigDict

from festivals.domain import Festival


class FestivalRecord(BaseModel):
    """Plain-data view of a Festival for downstream consumers."""

    model_config = ConfigDict(frozen=True)

    name: str
    venue: str
    start_date: date
    end_date: date
    duration_days: int
    month: int
    styles: list[str]
    concluded: bool
    days_remaining: int | None = None

    @classmethod
    def from_festival(cls, festival: Festival) -> Self:
        concluded = festival.has_concluded()
        return cls(
            name=festival.name,
            venue=festival.venue,
            start_date=festival.start_date,
            end_date=festival.end_date(),
            duration_days=festival.duration_days,
            month=festival.month().value,
            styles=[style.value for style in festival.ordered_styles()],
            concluded=concluded,
            days_remaining=None if concluded else festival.days_remaining(),
        )
