"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and the models
registered so far.
"""

from fastapi import APIRouter, Request

from trips_api.interfaces.trips.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    state = request.app.state
    return HealthResponse(
        status="ok",
        version=state.settings.version,
        models=state.model_registry.registered(),
    )
