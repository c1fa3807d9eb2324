"""
Pydantic schemas for the trips API responses.

These schemas define the API contract. Field names are exposed in
camelCase through aliases.
No business logic belongs here.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TripResponse(BaseModel):
    """A stored trip as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    destination: str
    description: Optional[str] = None
    price: float
    max_seats: int = Field(alias="maxSeats")
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    duration: int
    ratings: float
    booked_seats: int = Field(alias="bookedSeats")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class TripCreatedResponse(BaseModel):
    """Response schema for trip creation."""

    id: str


class TripUpdatedResponse(BaseModel):
    """Response schema for a successful patch."""

    msg: str


class ErrorResponse(BaseModel):
    """Body rendered for every forwarded error."""

    name: str
    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    models: list[str] = Field(default_factory=list)
