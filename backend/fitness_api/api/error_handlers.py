"""Error Handlers: global exception handlers for the fitness tracker API.

Invariants:
    - FitnessApiError → {"message", "code"} with the status of its kind
    - RequestValidationError → 400 with pydantic's message and field-level details
    - HTTPException (unknown route, wrong method) → same envelope
    - Exception (catch-all) → 500, logged with traceback, never leaks internals
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitness_api.core.errors import ErrorKind, FitnessApiError, error_body

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    404: "RESOURCE_NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(FitnessApiError)
    async def fitness_error_handler(request: Request, exc: FitnessApiError):
        logger.error(
            f"FitnessApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        code = _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail), "code": code},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(ErrorKind.INTERNAL, "Something went wrong!"),
        )


def build_validation_error_response(errors) -> dict:
    """Build the 400 envelope; message joins every field error."""
    details = [
        {
            "field": _field_name(e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]
    message = "; ".join(
        f"{d['field']}: {d['message']}" if d["field"] else d["message"]
        for d in details
    )
    return error_body(ErrorKind.VALIDATION, message or "Invalid request data", details)


def _field_name(loc) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "path", "query", "header"):
        parts = parts[1:]
    return ".".join(parts)
