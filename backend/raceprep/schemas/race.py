"""Race schemas."""

import datetime

from pydantic import Field, field_validator

from raceprep.models import RaceDistance
from raceprep.schemas.common import BaseSchema, PartialSchema, TimestampSchema

START_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def _strip_name(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("Race name is required")
    return value


class RaceBase(BaseSchema):
    """Base race schema."""

    name: str = Field(..., min_length=1, max_length=100, description="Race name")
    distance: RaceDistance = Field(RaceDistance.MARATHON, description="Race distance")
    date: datetime.date = Field(..., description="Race day (local calendar date)")
    start_time: str | None = Field(None, pattern=START_TIME_PATTERN, description="HH:MM")
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    is_travel_race: bool = Field(False, description="Race requires travel")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _strip_name(value)


class RaceCreate(RaceBase):
    """Schema for creating a race."""

    pass


class RaceUpdate(PartialSchema):
    """Schema for updating a race."""

    required_fields = ("name", "distance", "date", "is_travel_race")

    name: str | None = Field(None, min_length=1, max_length=100)
    distance: RaceDistance | None = None
    date: datetime.date | None = None
    start_time: str | None = Field(None, pattern=START_TIME_PATTERN)
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    is_travel_race: bool | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        return _strip_name(value)


class RaceDuplicate(PartialSchema):
    """Schema for duplicating a race onto a new date.

    Optional fields override the attributes copied from the source race.
    """

    required_fields = ("distance", "is_travel_race")

    name: str = Field(..., min_length=1, max_length=100)
    date: datetime.date
    distance: RaceDistance | None = None
    start_time: str | None = Field(None, pattern=START_TIME_PATTERN)
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    is_travel_race: bool | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _strip_name(value)


class RaceSchema(RaceBase, TimestampSchema):
    """Stored race."""

    id: str
    created_from_race_id: str | None = Field(None, description="Race this one was copied from")


class RaceListResponse(BaseSchema):
    """Race list response schema."""

    items: list[RaceSchema]
    total: int
