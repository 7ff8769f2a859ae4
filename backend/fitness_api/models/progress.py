"""Progress ORM: append-only body measurement entries.

Invariants:
    - user_id is stored as given; no check that the user exists
    - recorded_at defaults to insert time when not supplied
"""

import uuid
from datetime import datetime

from sqlalchemy import Float, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fitness_api.db.base import Base
from fitness_api.models.timestamps import utcnow


class Progress(Base):
    __tablename__ = "progress"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    body_fat: Mapped[float | None] = mapped_column(Float, nullable=True)
    muscle_mass: Mapped[float | None] = mapped_column(Float, nullable=True)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True,
    )
