"""
Input models for the trips application layer.

They enforce the writable shape of a trip. Server-derived fields
(duration, ratings, bookedSeats) are not declared, so they can never be
set through these models; unknown keys are ignored.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

NAME_MAX_LEN = 120


class TripCreate(BaseModel):
    """Payload accepted when creating a trip.

    Attributes:
        name: Unique display name.
        destination: Where the trip goes.
        description: Optional free text.
        price: Price per seat, non-negative.
        max_seats: Seats on offer (alias ``maxSeats``).
        start_date: First day (alias ``startDate``).
        end_date: Last day, not before the first (alias ``endDate``).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    destination: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    max_seats: int = Field(..., ge=1, alias="maxSeats")
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")

    @model_validator(mode="after")
    def _dates_ordered(self) -> "TripCreate":
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class TripUpdate(BaseModel):
    """Partial payload accepted when patching a trip.

    Only fields the client actually sent are applied. Date ordering is
    checked by the service against the stored trip. Only description may
    be cleared with null.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    destination: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    max_seats: Optional[int] = Field(default=None, ge=1, alias="maxSeats")
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")

    @field_validator("name", "destination", "price", "max_seats", "start_date", "end_date")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value
