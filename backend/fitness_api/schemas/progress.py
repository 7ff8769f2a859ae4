"""Progress Schemas: read shape for progress listings."""

from datetime import datetime
from uuid import UUID

from fitness_api.schemas.common import CamelModel


class ProgressRead(CamelModel):
    id: UUID
    user_id: UUID
    weight: float | None = None
    body_fat: float | None = None
    muscle_mass: float | None = None
    recorded_at: datetime
    created_at: datetime
