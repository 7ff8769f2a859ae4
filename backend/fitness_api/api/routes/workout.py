"""Workout Routes: the full CRUD resource family.

Invariants:
    - Each handler makes exactly one store call and renders its Outcome
    - Malformed identifiers are rejected (400) before the store is touched
    - PUT applies the full field set; PATCH applies only submitted fields
"""

from fastapi import APIRouter, Depends, Request, Security, status

from fitness_api.api.dependencies import api_key_scheme, get_workout_store
from fitness_api.api.responses import failure_response, to_response
from fitness_api.core.identifiers import parse_entity_id
from fitness_api.core.outcome import Failure
from fitness_api.models.workout import Workout
from fitness_api.schemas.common import ERROR_RESPONSES, MessageResponse
from fitness_api.schemas.workout import (
    WorkoutCreate, WorkoutEnvelope, WorkoutPatch, WorkoutRead,
)
from fitness_api.services.record_store import RecordStore

router = APIRouter(
    prefix="/api/v1/workout",
    tags=["workout"],
    dependencies=[Security(api_key_scheme)],
    responses=ERROR_RESPONSES,
)

_NOT_FOUND = {404: {"description": "Workout not found"}}


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    request: Request,
    store: RecordStore[Workout] = Depends(get_workout_store),
):
    """Get all workouts, newest first."""
    outcome = await store.list_newest()
    return to_response(outcome, request, schema=WorkoutRead)


@router.post(
    "", response_model=WorkoutEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_workout(
    body: WorkoutCreate,
    request: Request,
    store: RecordStore[Workout] = Depends(get_workout_store),
):
    """Add a new workout."""
    outcome = await store.create(body.to_record())
    return to_response(
        outcome, request,
        status_code=status.HTTP_201_CREATED,
        schema=WorkoutRead,
        message="Workout added successfully!",
        entity_key="workout",
    )


@router.put("/{workout_id}", response_model=WorkoutEnvelope, responses=_NOT_FOUND)
async def replace_workout(
    workout_id: str,
    body: WorkoutCreate,
    request: Request,
    store: RecordStore[Workout] = Depends(get_workout_store),
):
    """Update every field of an existing workout."""
    parsed = parse_entity_id(workout_id, "workout")
    if isinstance(parsed, Failure):
        return failure_response(parsed, request)
    outcome = await store.update(parsed.value, body.to_record())
    return to_response(
        outcome, request,
        schema=WorkoutRead,
        message="Workout updated successfully!",
        entity_key="workout",
    )


@router.patch("/{workout_id}", response_model=WorkoutEnvelope, responses=_NOT_FOUND)
async def patch_workout(
    workout_id: str,
    body: WorkoutPatch,
    request: Request,
    store: RecordStore[Workout] = Depends(get_workout_store),
):
    """Update only the submitted fields of a workout (e.g. caloriesBurned)."""
    parsed = parse_entity_id(workout_id, "workout")
    if isinstance(parsed, Failure):
        return failure_response(parsed, request)
    outcome = await store.update(parsed.value, body.changes())
    return to_response(
        outcome, request,
        schema=WorkoutRead,
        message="Workout partially updated successfully!",
        entity_key="workout",
    )


@router.delete("/{workout_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_workout(
    workout_id: str,
    request: Request,
    store: RecordStore[Workout] = Depends(get_workout_store),
):
    """Delete a workout by id."""
    parsed = parse_entity_id(workout_id, "workout")
    if isinstance(parsed, Failure):
        return failure_response(parsed, request)
    outcome = await store.delete(parsed.value)
    return to_response(
        outcome, request, message="Workout deleted successfully",
    )
