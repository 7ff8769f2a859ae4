"""Record Store: one logical store operation per call, reported as an Outcome.

Invariants:
    - list_newest orders by created_at descending
    - Integrity/data errors on write → Failure(VALIDATION) with driver text
    - Any other SQLAlchemy error → Failure(STORE); raw text kept in detail only
    - Unknown identifier → Failure(NOT_FOUND); the session is rolled back on failure
    - Fields are applied one by one, so unchanged columns keep prior values
"""

import logging
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_api.core.errors import ErrorKind
from fitness_api.core.outcome import Failure, Ok, Outcome, not_found
from fitness_api.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordStore(Generic[ModelT]):
    """CRUD over a single table, named `resource` in messages and logs."""

    def __init__(self, db: AsyncSession, model: type[ModelT], resource: str):
        self._db = db
        self._model = model
        self.resource = resource

    async def list_newest(self) -> Outcome[list[ModelT]]:
        try:
            result = await self._db.execute(
                select(self._model).order_by(self._model.created_at.desc()),
            )
            return Ok(list(result.scalars().all()))
        except SQLAlchemyError as e:
            return await self._failure("list", e)

    async def create(self, fields: dict[str, Any]) -> Outcome[ModelT]:
        record = self._model(**fields)
        try:
            self._db.add(record)
            await self._db.commit()
            await self._db.refresh(record)
        except SQLAlchemyError as e:
            return await self._failure("create", e)
        logger.info(
            f"{self.resource} created",
            extra={"resource": self.resource, "entity_id": str(record.id)},
        )
        return Ok(record)

    async def update(
        self, entity_id: UUID, fields: dict[str, Any],
    ) -> Outcome[ModelT]:
        """Apply `fields` onto the stored record (replace or patch)."""
        try:
            record = await self._db.get(self._model, entity_id)
            if record is None:
                return not_found(self.resource)
            for name, value in fields.items():
                setattr(record, name, value)
            await self._db.commit()
            await self._db.refresh(record)
        except SQLAlchemyError as e:
            return await self._failure("update", e)
        logger.info(
            f"{self.resource} updated",
            extra={"resource": self.resource, "entity_id": str(entity_id)},
        )
        return Ok(record)

    async def delete(self, entity_id: UUID) -> Outcome[None]:
        try:
            record = await self._db.get(self._model, entity_id)
            if record is None:
                return not_found(self.resource)
            await self._db.delete(record)
            await self._db.commit()
        except SQLAlchemyError as e:
            return await self._failure("delete", e)
        logger.info(
            f"{self.resource} deleted",
            extra={"resource": self.resource, "entity_id": str(entity_id)},
        )
        return Ok(None)

    async def _failure(self, operation: str, exc: SQLAlchemyError) -> Failure:
        await self._db.rollback()
        detail = str(getattr(exc, "orig", None) or exc)
        if operation != "list" and isinstance(exc, (IntegrityError, DataError)):
            logger.warning(
                f"{self.resource} {operation} rejected by store: {detail}",
                extra={"resource": self.resource, "operation": operation},
            )
            return Failure(ErrorKind.VALIDATION, detail)
        logger.error(
            f"{self.resource} {operation} failed: {exc}",
            extra={"resource": self.resource, "operation": operation},
        )
        return Failure(
            ErrorKind.STORE,
            f"Database error during {self.resource} {operation}",
            detail,
        )
