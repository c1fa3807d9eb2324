"""
Dependency wiring for the trips bounded context.

The controller, its service and the model registry are built once at
application start-up and stored on `app.state`; routes receive the shared
controller through FastAPI's dependency injection.
"""

from fastapi import Request

from trips_api.application.trips.service import TripsService
from trips_api.core.config import Settings
from trips_api.domain.ports import ModelRegistry
from trips_api.infrastructure.trips.schema import trip_schema
from trips_api.interfaces.trips.controller import TripsController


def build_trips_controller(registry: ModelRegistry, settings: Settings) -> TripsController:
    """Build the TripsController with its service dependencies."""
    service = TripsService(registry=registry, schema_factory=trip_schema)
    return TripsController(
        service,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )


def get_trips_controller(request: Request) -> TripsController:
    """Return the controller wired into this application."""
    return request.app.state.trips_controller
