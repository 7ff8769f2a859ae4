"""Response Rendering: the single place where Outcome values become HTTP responses.

Invariants:
    - Failure → {"message", "code"} with the status of its ErrorKind
    - STORE failures show detail only when settings.expose_error_details is set
    - Ok with a message → {"message", <entity_key>: entity}; without → raw payload
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fitness_api.core.errors import ErrorKind, error_body, error_code_for
from fitness_api.core.outcome import Failure, Outcome

logger = logging.getLogger(__name__)


def failure_response(
    failure: Failure, request: Request | None = None,
) -> JSONResponse:
    """Convert a Failure outcome to its JSON error response."""
    message = failure.message
    if failure.kind is ErrorKind.STORE and failure.detail and _expose_details(request):
        message = failure.detail
    if request is not None:
        logger.info(
            f"{request.method} {request.url.path} → {failure.http_status}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": failure.http_status,
                "error_code": error_code_for(failure.kind),
            },
        )
    return JSONResponse(
        status_code=failure.http_status,
        content=error_body(failure.kind, message),
    )


def to_response(
    outcome: Outcome[Any],
    request: Request,
    *,
    status_code: int = 200,
    schema: type[BaseModel] | None = None,
    message: str | None = None,
    entity_key: str | None = None,
) -> JSONResponse:
    """Render an Outcome; `schema` serializes the Ok value (entity or list)."""
    if isinstance(outcome, Failure):
        return failure_response(outcome, request)
    payload = serialize(outcome.value, schema) if schema else None
    if message is None:
        content = payload
    else:
        content = {"message": message}
        if entity_key is not None:
            content[entity_key] = payload
    return JSONResponse(status_code=status_code, content=content)


def serialize(value: Any, schema: type[BaseModel]) -> Any:
    if isinstance(value, list):
        return [_dump(item, schema) for item in value]
    return _dump(value, schema)


def _dump(item: Any, schema: type[BaseModel]) -> dict:
    return schema.model_validate(item).model_dump(mode="json", by_alias=True)


def _expose_details(request: Request | None) -> bool:
    if request is None:
        return False
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.expose_error_details)
