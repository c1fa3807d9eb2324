"""
Centralized error responder for FastAPI.

Every AppError forwarded by a request handler ends here and is rendered
as ErrorResponse {name, message} with the record's status code.
Requests FastAPI cannot decode or bind (malformed JSON, missing body,
bad query parameters) are rendered the same way as a 400 ValidationError.
Stray exceptions are answered with a bare 500; no stack traces or
internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from trips_api.domain.errors import AppError, HttpStatusCode

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = "Internal Server Error"


def _error_response(status_code: int, name: str, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"name": name, "message": message})


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "request"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register the error responder on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
        """Render a forwarded error record."""
        if exc.operational:
            logger.warning("%s (%d): %s", exc.name, exc.http_status, exc.message)
        else:
            logger.error("%s (%d): %s", exc.name, exc.http_status, exc.message)
        return _error_response(exc.http_status, exc.name, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render undecodable or unbindable requests as a 400 ValidationError."""
        message = _describe_request_errors(exc)
        logger.warning("ValidationError (%d): %s", HttpStatusCode.BAD_REQUEST, message)
        return _error_response(HttpStatusCode.BAD_REQUEST, "ValidationError", message)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return JSONResponse(
            status_code=HttpStatusCode.INTERNAL_SERVER_ERROR, content=INTERNAL_ERROR_BODY
        )
