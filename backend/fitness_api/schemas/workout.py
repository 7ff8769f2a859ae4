"""Workout Schemas: create/replace, patch, and read shapes.

Invariants:
    - WorkoutCreate is the full field set, used by POST and PUT
    - WorkoutPatch holds only optional fields; changes() returns submitted ones
    - Explicit null is rejected for fields the store requires
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from fitness_api.schemas.common import CamelModel, MessageResponse

_REQUIRED_FIELDS = ("name", "type", "duration")

# Integer columns are 32-bit signed.
INT_MAX = 2_147_483_647


def _strip_text(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


class WorkoutCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    type: str = Field(min_length=1, max_length=100)
    duration: int = Field(ge=0, le=INT_MAX)
    calories_burned: int | None = Field(None, ge=0, le=INT_MAX)

    @field_validator("name", "type")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_text(v)

    def to_record(self) -> dict:
        return self.model_dump()


class WorkoutPatch(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    type: str | None = Field(None, min_length=1, max_length=100)
    duration: int | None = Field(None, ge=0, le=INT_MAX)
    calories_burned: int | None = Field(None, ge=0, le=INT_MAX)

    @field_validator("name", "type")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_text(v)

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in _REQUIRED_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class WorkoutRead(CamelModel):
    id: UUID
    name: str
    type: str
    duration: int
    calories_burned: int | None = None
    created_at: datetime
    updated_at: datetime


class WorkoutEnvelope(MessageResponse):
    workout: WorkoutRead
