"""Workout Schemas: full vs. patch payloads and camelCase wire format.

Tests cover:
    - WorkoutCreate requires name, type, duration
    - WorkoutPatch.changes() returns only submitted fields
    - explicit null rejected for required fields in a patch
    - integer fields stay within the 32-bit column range
    - WorkoutRead serializes camelCase from ORM attributes
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from fitness_api.models.workout import Workout
from fitness_api.schemas.workout import (
    INT_MAX, WorkoutCreate, WorkoutPatch, WorkoutRead,
)


def test_create_accepts_camel_case():
    body = WorkoutCreate.model_validate(
        {"name": "Run", "type": "cardio", "duration": 30, "caloriesBurned": 300},
    )
    assert body.calories_burned == 300


def test_create_record_has_every_field():
    body = WorkoutCreate(name="Run", type="cardio", duration=30)
    assert body.to_record() == {
        "name": "Run", "type": "cardio", "duration": 30, "calories_burned": None,
    }


@pytest.mark.parametrize("missing", ["name", "type", "duration"])
def test_create_requires_field(missing):
    payload = {"name": "Run", "type": "cardio", "duration": 30}
    payload.pop(missing)
    with pytest.raises(ValidationError):
        WorkoutCreate.model_validate(payload)


def test_create_strips_text():
    body = WorkoutCreate(name="  Run ", type="cardio", duration=30)
    assert body.name == "Run"


def test_patch_changes_only_submitted():
    patch = WorkoutPatch.model_validate({"caloriesBurned": 350})
    assert patch.changes() == {"calories_burned": 350}


def test_patch_empty_has_no_changes():
    assert WorkoutPatch().changes() == {}


def test_patch_keeps_explicit_null_for_optional_field():
    patch = WorkoutPatch.model_validate({"caloriesBurned": None})
    assert patch.changes() == {"calories_burned": None}


@pytest.mark.parametrize("field", ["name", "type", "duration"])
def test_patch_rejects_null_required_field(field):
    with pytest.raises(ValidationError):
        WorkoutPatch.model_validate({field: None})


def test_read_serializes_camel_case_from_orm():
    now = datetime(2026, 10, 17, tzinfo=timezone.utc)
    workout = Workout(
        id=uuid4(), name="Run", type="cardio", duration=30,
        calories_burned=300, created_at=now, updated_at=now,
    )
    data = WorkoutRead.model_validate(workout).model_dump(mode="json", by_alias=True)
    assert data["caloriesBurned"] == 300
    assert data["createdAt"].startswith("2026-10-17T00:00:00")
    assert set(data) == {
        "id", "name", "type", "duration", "caloriesBurned", "createdAt", "updatedAt",
    }


@pytest.mark.parametrize("schema", [WorkoutCreate, WorkoutPatch])
@pytest.mark.parametrize("field", ["duration", "caloriesBurned"])
def test_integer_fields_are_bounded_by_column_range(schema, field):
    payload = {"name": "Run", "type": "cardio", "duration": 30}
    with pytest.raises(ValidationError):
        schema.model_validate({**payload, field: INT_MAX + 1})
    schema.model_validate({**payload, field: INT_MAX})
