"""Route Dependencies: store providers and the documented API key scheme.

Invariants:
    - api_key_scheme only documents the x-api-key header in OpenAPI;
      enforcement happens in ApiKeyMiddleware before routing
    - Each request gets its own RecordStore bound to its own session
"""

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_api.core.authorization import API_KEY_HEADER
from fitness_api.infrastructure.database import get_db
from fitness_api.models.progress import Progress
from fitness_api.models.user import User
from fitness_api.models.workout import Workout
from fitness_api.services.record_store import RecordStore

api_key_scheme = APIKeyHeader(
    name=API_KEY_HEADER,
    auto_error=False,
    description="Shared secret required by every /api/v1 resource route.",
)


def get_workout_store(
    db: AsyncSession = Depends(get_db),
) -> RecordStore[Workout]:
    return RecordStore(db, Workout, "workout")


def get_progress_store(
    db: AsyncSession = Depends(get_db),
) -> RecordStore[Progress]:
    return RecordStore(db, Progress, "progress")


def get_user_store(db: AsyncSession = Depends(get_db)) -> RecordStore[User]:
    return RecordStore(db, User, "user")
