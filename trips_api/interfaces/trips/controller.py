"""
Request handlers for the trips routes.

Each handler ends in exactly one of:
- a terminal response (success, or a generic 500 for unexpected faults);
- one AppError raised to the centralized error responder.

AppErrors coming out of the service are re-wrapped under the action's
own name before being forwarded. Anything else is logged and collapsed
into a 500 whose body reveals nothing about the cause.
"""

import logging
from typing import Any, Mapping, Optional

from fastapi.responses import JSONResponse, Response

from trips_api.application.trips.service import TripsService
from trips_api.domain.errors import AppError, HttpStatusCode
from trips_api.domain.trips.entities import protected_fields_in, protected_fields_message
from trips_api.interfaces.trips.schemas import (
    TripCreatedResponse,
    TripResponse,
    TripUpdatedResponse,
)
from trips_api.shared.errors.handlers import INTERNAL_ERROR_BODY

logger = logging.getLogger(__name__)

TRIP_NOT_FOUND = "Trip not found"
TRIP_UPDATED = "Trip updated successfully"


def _rewrap(action: str, exc: AppError) -> AppError:
    return AppError(False, f"{action}_Error", HttpStatusCode.BAD_REQUEST, exc.message)


def _not_found(action: str) -> AppError:
    return AppError(False, f"{action}_Error", HttpStatusCode.NOT_FOUND, TRIP_NOT_FOUND)


def _internal_error(action: str) -> JSONResponse:
    logger.exception("Unexpected error in %s", action)
    return JSONResponse(
        status_code=HttpStatusCode.INTERNAL_SERVER_ERROR, content=INTERNAL_ERROR_BODY
    )


def _serialize(trip: dict[str, Any]) -> dict[str, Any]:
    return TripResponse.model_validate(trip).model_dump(mode="json", by_alias=True)


class TripsController:
    """Per-route handlers for trips.

    Args:
        service: Shared trips service.
        default_limit: Page size when the client gives none.
        max_limit: Largest page size served.
    """

    def __init__(
        self, service: TripsService, default_limit: int = 100, max_limit: int = 500
    ) -> None:
        self._service = service
        self._default_limit = default_limit
        self._max_limit = max_limit

    def list_trips(
        self, limit: Optional[int] = None, offset: int = 0, sort: Optional[str] = None
    ) -> Response:
        page_size = min(limit or self._default_limit, self._max_limit)
        try:
            trips = self._service.list(page_size, offset, sort)
        except AppError as exc:
            raise _rewrap("listTrips", exc) from exc
        except Exception:
            return _internal_error("listTrips")
        return JSONResponse(
            status_code=HttpStatusCode.OK, content=[_serialize(trip) for trip in trips]
        )

    def get_trip_by_id(self, trip_id: str) -> Response:
        try:
            trip = self._service.read_by_id(trip_id)
        except AppError as exc:
            raise _rewrap("getTripById", exc) from exc
        except Exception:
            return _internal_error("getTripById")
        if trip is None:
            raise _not_found("getTripById")
        return JSONResponse(status_code=HttpStatusCode.OK, content=_serialize(trip))

    def create_trip(self, payload: Any) -> Response:
        try:
            trip_id = self._service.create(payload)
        except AppError as exc:
            raise _rewrap("createTrip", exc) from exc
        except Exception:
            return _internal_error("createTrip")
        body = TripCreatedResponse(id=trip_id)
        return JSONResponse(status_code=HttpStatusCode.CREATED, content=body.model_dump())

    def patch_trip_by_id(self, trip_id: str, payload: Any) -> Response:
        if isinstance(payload, Mapping):
            protected = protected_fields_in(payload)
            if protected:
                raise AppError(
                    True,
                    "patchTripById_Error",
                    HttpStatusCode.BAD_REQUEST,
                    protected_fields_message(protected),
                )

        try:
            trip = self._service.patch_by_id(trip_id, payload)
        except AppError as exc:
            raise _rewrap("updateTripById", exc) from exc
        except Exception:
            return _internal_error("updateTripById")
        if trip is None:
            raise _not_found("patchTripById")
        body = TripUpdatedResponse(msg=TRIP_UPDATED)
        return JSONResponse(status_code=HttpStatusCode.OK, content=body.model_dump())

    def remove_trip_by_id(self, trip_id: str) -> Response:
        try:
            self._service.delete_by_id(trip_id)
        except AppError as exc:
            raise _rewrap("deleteTripById", exc) from exc
        except Exception:
            return _internal_error("deleteTripById")
        return Response(status_code=HttpStatusCode.NO_CONTENT)
