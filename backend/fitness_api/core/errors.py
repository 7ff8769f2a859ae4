"""Error Hierarchy: error kinds and typed exceptions for every API failure mode.

Invariants:
    - Every failure carries an ErrorKind; the kind alone decides HTTP status and code
    - to_response() always produces the {"message", "code"} envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - ErrorKind is shared by raised exceptions (gate, session manager) and by
      Failure outcomes returned from the store layer
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Failure taxonomy for the whole API."""
    UNAUTHORIZED = "unauthorized"
    VALIDATION = "validation"
    MALFORMED_ID = "malformed_id"
    NOT_FOUND = "not_found"
    STORE = "store"
    INTERNAL = "internal"


_HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.VALIDATION: 400,
    ErrorKind.MALFORMED_ID: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE: 500,
    ErrorKind.INTERNAL: 500,
}

_ERROR_CODE: dict[ErrorKind, str] = {
    ErrorKind.UNAUTHORIZED: "UNAUTHORIZED",
    ErrorKind.VALIDATION: "VALIDATION_ERROR",
    ErrorKind.MALFORMED_ID: "INVALID_ID",
    ErrorKind.NOT_FOUND: "RESOURCE_NOT_FOUND",
    ErrorKind.STORE: "DATABASE_ERROR",
    ErrorKind.INTERNAL: "INTERNAL_ERROR",
}


def http_status_for(kind: ErrorKind) -> int:
    return _HTTP_STATUS[kind]


def error_code_for(kind: ErrorKind) -> str:
    return _ERROR_CODE[kind]


def error_body(
    kind: ErrorKind, message: str, details: list[dict[str, Any]] | None = None,
) -> dict:
    """Build the standard error envelope."""
    body: dict[str, Any] = {"message": message, "code": error_code_for(kind)}
    if details:
        body["details"] = details
    return body


class FitnessApiError(Exception):
    """Base exception for errors raised (not returned) inside the API."""

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.kind = kind

    @property
    def http_status(self) -> int:
        return http_status_for(self.kind)

    @property
    def code(self) -> str:
        return error_code_for(self.kind)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return error_body(self.kind, self.message)


class UnauthorizedError(FitnessApiError):
    """Shared secret missing or wrong."""
    def __init__(self):
        super().__init__(
            "Unauthorized: Invalid or missing API key", ErrorKind.UNAUTHORIZED,
        )


class DatabaseError(FitnessApiError):
    """Store operation failed outside a handler's own translation."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}", ErrorKind.STORE,
        )
        self.operation = operation
