"""
Schema descriptor for the trips model.

A fresh column list is built on every call: SQLAlchemy columns can belong
to a single table only, so each creation attempt needs its own copy.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    Integer,
    String,
    Text,
)
from sqlalchemy.sql.schema import SchemaItem


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def trip_schema() -> list[SchemaItem]:
    """Columns and constraints of the trips table."""
    return [
        Column("id", String(32), primary_key=True),
        Column("name", String(120), nullable=False, unique=True),
        Column("destination", String(120), nullable=False),
        Column("description", Text, nullable=True),
        Column("price", Float, nullable=False),
        Column("maxSeats", Integer, nullable=False),
        Column("startDate", Date, nullable=False),
        Column("endDate", Date, nullable=False),
        Column("duration", Integer, nullable=False),
        Column("ratings", Float, nullable=False, default=0.0),
        Column("bookedSeats", Integer, nullable=False, default=0),
        Column("createdAt", DateTime, nullable=False, default=_utcnow),
        CheckConstraint("price >= 0", name="ck_trips_price_non_negative"),
        CheckConstraint('"maxSeats" >= 1', name="ck_trips_max_seats_positive"),
        CheckConstraint('"endDate" >= "startDate"', name="ck_trips_dates_ordered"),
    ]
