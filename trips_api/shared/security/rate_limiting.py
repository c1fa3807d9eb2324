"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Protects against resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from trips_api.core.config import Settings
from trips_api.domain.errors import HttpStatusCode


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter applying the configured default limit.

    Each application gets its own limiter, hence its own in-memory counters.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render rate limit overflow in the standard error shape.

    Kept synchronous: SlowAPIMiddleware calls it directly for sync routes.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    return JSONResponse(
        status_code=HttpStatusCode.TOO_MANY_REQUESTS,
        content={"name": "RateLimit_Error", "message": f"Rate limit exceeded: {exc.detail}"},
    )
