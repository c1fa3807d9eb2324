"""
Domain rules for the trip entity.

Trips carry a few server-derived attributes that clients may never write.
This module holds those rules; it contains no framework imports and no IO.
"""

from datetime import date
from typing import Any, Mapping

TRIP_MODEL_NAME = "trips"

# Order matters: error messages list offending fields in this order.
PROTECTED_FIELDS: tuple[str, ...] = ("duration", "ratings", "bookedSeats")


def protected_fields_in(payload: Mapping[str, Any]) -> list[str]:
    """Return the protected fields present in an update payload.

    Presence of the key is enough, whatever its value.
    """
    return [field for field in PROTECTED_FIELDS if field in payload]


def protected_fields_message(fields: list[str]) -> str:
    """Describe a rejected write to protected fields."""
    return "you're not allowed to change the following fields: " + ", ".join(fields)


def trip_duration(start: date, end: date) -> int:
    """Number of calendar days a trip spans, both ends included."""
    return (end - start).days + 1
