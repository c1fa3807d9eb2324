"""
Service: Trip CRUD.

Input: plain payload dicts and ids coming from the request handlers.
Output: trip documents (dicts keyed by column name) or ids.
Side effects: reads and writes the trips model through the registry.
Failure cases:
    - AppError(operational, 400) for payloads breaking the trip shape.
    - AppError(operational, 400) for writes to protected fields.
    - AppError(non-operational) when the trips model cannot be obtained.
"""

import logging
from typing import Any, Callable, Mapping, Optional, Sequence

from pydantic import ValidationError

from trips_api.application.trips.dtos import TripCreate, TripUpdate
from trips_api.domain.errors import AppError, HttpStatusCode, validation_error
from trips_api.domain.ports import ModelHandle, ModelRegistry
from trips_api.domain.trips.entities import (
    TRIP_MODEL_NAME,
    protected_fields_in,
    protected_fields_message,
    trip_duration,
)

logger = logging.getLogger(__name__)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "payload"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise validation_error("Payload must be a JSON object")
    return payload


class TripsService:
    """Entity service for trips.

    The model handle is obtained from the registry on first use and kept
    for the lifetime of the service.

    Args:
        registry: Registry resolving the trips model.
        schema_factory: Builds a fresh schema descriptor for the registry.
            Called again after a failed attempt, since SQLAlchemy columns
            cannot be reused once bound to a table.
        model_name: Entity name of the trips model.
    """

    def __init__(
        self,
        registry: ModelRegistry,
        schema_factory: Callable[[], Sequence[Any]],
        model_name: str = TRIP_MODEL_NAME,
    ) -> None:
        self._registry = registry
        self._schema_factory = schema_factory
        self._model_name = model_name
        self._handle: Optional[ModelHandle] = None
        logger.debug("Created TripsService for model '%s'", model_name)

    def _model(self) -> ModelHandle:
        if self._handle is None:
            self._handle = self._registry.get_or_create_model(
                self._model_name, self._schema_factory()
            )
        return self._handle

    def list(self, limit: int, offset: int, sort: Optional[str] = None) -> list[dict[str, Any]]:
        """Return up to `limit` trips starting at `offset`."""
        logger.info("Listing trips: limit=%d, offset=%d, sort=%s", limit, offset, sort)
        return self._model().find(limit=limit, offset=offset, sort=sort)

    def read_by_id(self, trip_id: str) -> Optional[dict[str, Any]]:
        """Return one trip, or None when no trip has this id."""
        return self._model().find_by_id(trip_id)

    def create(self, payload: Any) -> str:
        """Validate and store a new trip.

        Server-derived fields are computed here; any value the client sent
        for them is ignored.

        Args:
            payload: Decoded JSON request body.

        Returns:
            The id of the new trip.

        Raises:
            AppError: Operational 400 when the payload breaks the trip shape.
        """
        data = _require_mapping(payload)
        try:
            trip = TripCreate.model_validate(data)
        except ValidationError as exc:
            raise validation_error(_describe(exc)) from exc

        values = trip.model_dump(by_alias=True)
        values["duration"] = trip_duration(trip.start_date, trip.end_date)
        values["ratings"] = 0.0
        values["bookedSeats"] = 0

        trip_id = self._model().insert(values)
        logger.info("Created trip %s", trip_id)
        return trip_id

    def patch_by_id(self, trip_id: str, payload: Any) -> Optional[dict[str, Any]]:
        """Apply a partial update to a trip.

        Unknown keys are ignored. Changing either date recomputes the
        duration.

        Args:
            trip_id: Id of the trip to update.
            payload: Decoded JSON request body.

        Returns:
            The updated trip, or None when no trip has this id.

        Raises:
            AppError: Operational 400 for protected fields or invalid values.
        """
        data = _require_mapping(payload)
        protected = protected_fields_in(data)
        if protected:
            raise AppError(
                True,
                "ProtectedFieldsError",
                HttpStatusCode.BAD_REQUEST,
                protected_fields_message(protected),
            )

        try:
            changes = TripUpdate.model_validate(data).model_dump(by_alias=True, exclude_unset=True)
        except ValidationError as exc:
            raise validation_error(_describe(exc)) from exc

        model = self._model()
        current = model.find_by_id(trip_id)
        if current is None:
            return None

        if "startDate" in changes or "endDate" in changes:
            start = changes.get("startDate") or current["startDate"]
            end = changes.get("endDate") or current["endDate"]
            if end < start:
                raise validation_error("endDate must not be before startDate")
            changes["duration"] = trip_duration(start, end)

        logger.info("Patching trip %s: fields=%s", trip_id, sorted(changes))
        return model.update_by_id(trip_id, changes)

    def delete_by_id(self, trip_id: str) -> None:
        """Delete a trip. Unknown ids are a no-op."""
        removed = self._model().delete_by_id(trip_id)
        logger.info("Deleted trip %s (removed=%d)", trip_id, removed)
