"""User Schemas: read shape for user listings."""

from datetime import datetime
from uuid import UUID

from fitness_api.schemas.common import CamelModel


class UserRead(CamelModel):
    id: UUID
    name: str
    age: int | None = None
    gender: str | None = None
    email: str
    created_at: datetime
