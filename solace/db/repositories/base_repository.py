"""
Base repository - generic async data access shared by every aggregate.
Repositories flush but never commit; the request session commits once per request.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from solace.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic CRUD. Subclasses add the queries their service needs."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> ModelType | None:
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_many(self, *, skip: int = 0, limit: int = 20) -> list[ModelType]:
        result = await self.session.execute(
            select(self.model).offset(skip).limit(limit).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def count(self, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity and load its generated id."""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def save(self, entity: ModelType) -> ModelType:
        """Flush pending changes on an already-loaded entity."""
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        await self.session.delete(entity)
        await self.session.flush()
