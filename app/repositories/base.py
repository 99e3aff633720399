from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Generic, Sequence, TypeVar

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.database import Base
from app.exceptions import ConflictError, ValidationError

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Primary keys are signed 64-bit integers in every supported backend
MAX_ID = 2**63 - 1


class EntityStore(Generic[ModelT]):
    """
    Generic CRUD primitives over one mapped entity type.

    None of the read paths look at ``deleted_at``: soft-deleted rows stay
    reachable by id and through ``get_all``. Writes are flushed, never
    committed; the caller owns the transaction. Each write runs in its own
    SAVEPOINT so a constraint violation only undoes that write.
    """

    model: type[ModelT]
    # Columns an update payload may never touch
    immutable_fields: frozenset[str] = frozenset({"id", "created_at", "deleted_at"})

    def __init__(self, db: AsyncSession):
        self.db = db

    def _select(self):
        return select(self.model)

    async def get_all(self) -> Sequence[ModelT]:
        result = await self.db.execute(self._select().order_by(self.model.id))
        return result.scalars().all()

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        # No row can carry an id the column type cannot hold
        if not -MAX_ID - 1 <= entity_id <= MAX_ID:
            return None
        result = await self.db.execute(self._select().filter(self.model.id == entity_id))
        return result.scalars().first()

    async def create(self, **fields: Any) -> ModelT:
        async with self._write():
            entity = self.model(**fields)
            self.db.add(entity)
            await self.db.flush()
        logger.debug("entity_created", entity=self.model.__name__, id=entity.id)
        return entity

    async def update(self, entity_id: int, partial: dict[str, Any]) -> ModelT | None:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return None
        return await self._merge(entity, partial)

    async def soft_delete(self, entity_id: int) -> None:
        entity = await self.get_by_id(entity_id)
        if entity is None or entity.deleted_at is not None:
            return
        async with self._write():
            entity.deleted_at = datetime.now(timezone.utc)
            await self.db.flush()
        logger.debug("entity_soft_deleted", entity=self.model.__name__, id=entity_id)

    async def _merge(self, entity: ModelT, partial: dict[str, Any]) -> ModelT:
        changes = self._mergeable(partial)
        async with self._write():
            # Scalar overwrite of provided values only
            for key, value in changes.items():
                setattr(entity, key, value)
            await self.db.flush()
        logger.debug("entity_updated", entity=self.model.__name__, id=entity.id, fields=sorted(changes))
        return entity

    def _mergeable(self, partial: dict[str, Any]) -> dict[str, Any]:
        columns = set(self.model.__table__.columns.keys())
        unknown = set(partial) - columns
        if unknown:
            raise ValidationError(f"Unknown fields for {self.model.__name__}: {', '.join(sorted(unknown))}")
        return {
            key: value
            for key, value in partial.items()
            if value is not None and key not in self.immutable_fields
        }

    @asynccontextmanager
    async def _write(self):
        # begin_nested() flushes pending state first, so mutate inside the block
        try:
            async with self.db.begin_nested():
                yield
        except IntegrityError as exc:
            raise ConflictError(f"{self.model.__name__} violates a unique constraint") from exc
