"""
FastAPI router for the trips bounded context.

All routes delegate to the shared TripsController. No business logic here.
Errors are rendered by the centralized error handlers.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import Response

from trips_api.interfaces.trips.controller import TripsController
from trips_api.interfaces.trips.dependencies import get_trips_controller
from trips_api.interfaces.trips.schemas import (
    ErrorResponse,
    TripCreatedResponse,
    TripResponse,
    TripUpdatedResponse,
)

router = APIRouter(prefix="/trips", tags=["trips"])

_ERRORS = {400: {"model": ErrorResponse}}
_ERRORS_WITH_NOT_FOUND = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=list[TripResponse],
    responses=_ERRORS,
    summary="List trips",
    description="Return a page of trips in storage order, or sorted by a field.",
)
def list_trips(
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    sort: Optional[str] = Query(default=None, max_length=64),
    controller: TripsController = Depends(get_trips_controller),
) -> Response:
    """List trips."""
    return controller.list_trips(limit=limit, offset=offset, sort=sort)


@router.get(
    "/{trip_id}",
    response_model=TripResponse,
    responses=_ERRORS_WITH_NOT_FOUND,
    summary="Get a trip",
)
def get_trip_by_id(
    trip_id: str,
    controller: TripsController = Depends(get_trips_controller),
) -> Response:
    """Return a single trip."""
    return controller.get_trip_by_id(trip_id)


@router.post(
    "",
    status_code=201,
    response_model=TripCreatedResponse,
    responses=_ERRORS,
    summary="Create a trip",
)
def create_trip(
    payload: Any = Body(...),
    controller: TripsController = Depends(get_trips_controller),
) -> Response:
    """Create a trip and return its id."""
    return controller.create_trip(payload)


@router.patch(
    "/{trip_id}",
    response_model=TripUpdatedResponse,
    responses=_ERRORS_WITH_NOT_FOUND,
    summary="Update a trip",
    description="Partially update a trip. duration, ratings and bookedSeats are read-only.",
)
def patch_trip_by_id(
    trip_id: str,
    payload: Any = Body(...),
    controller: TripsController = Depends(get_trips_controller),
) -> Response:
    """Apply a partial update to a trip."""
    return controller.patch_trip_by_id(trip_id, payload)


@router.delete(
    "/{trip_id}",
    status_code=204,
    response_class=Response,
    responses=_ERRORS,
    summary="Delete a trip",
)
def remove_trip_by_id(
    trip_id: str,
    controller: TripsController = Depends(get_trips_controller),
) -> Response:
    """Delete a trip. Deleting an unknown id still succeeds."""
    return controller.remove_trip_by_id(trip_id)
