"""
Error taxonomy shared by every layer.

An ErrorRecord separates operational failures (expected, safe to describe
to the client) from non-operational ones (unexpected faults that are still
reported, but flagged). AppError is the exception that carries a record
across layer boundaries.
No framework imports allowed.
"""

from dataclasses import dataclass
from enum import IntEnum


class HttpStatusCode(IntEnum):
    """HTTP status codes used by the service."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True)
class ErrorRecord:
    """Typed carrier for a classified failure.

    Attributes:
        operational: True for expected, recoverable conditions.
        name: Stable tag identifying the failing action.
        http_status: Status code the responder must use.
        message: Human-readable description.
    """

    operational: bool
    name: str
    http_status: int
    message: str


class AppError(Exception):
    """Exception carrying an ErrorRecord up to the error responder."""

    def __init__(
        self, operational: bool, name: str, http_status: int, message: str
    ) -> None:
        self.record = ErrorRecord(
            operational=operational,
            name=name,
            http_status=int(http_status),
            message=message,
        )
        super().__init__(message)

    @property
    def operational(self) -> bool:
        return self.record.operational

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def http_status(self) -> int:
        return self.record.http_status

    @property
    def message(self) -> str:
        return self.record.message

    def __repr__(self) -> str:
        return (
            f"AppError(operational={self.operational!r}, name={self.name!r}, "
            f"http_status={self.http_status!r}, message={self.message!r})"
        )


def validation_error(message: str) -> AppError:
    """Build the operational 400 raised for payloads that break the schema."""
    return AppError(True, "ValidationError", HttpStatusCode.BAD_REQUEST, message)
