"""Shared schema bases and response envelopes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase or snake_case input, emits camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str


class ErrorDetail(BaseModel):
    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    message: str
    code: str
    details: list[ErrorDetail] | None = None


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input or identifier"},
    401: {"model": ErrorResponse, "description": "Missing or wrong x-api-key"},
}
