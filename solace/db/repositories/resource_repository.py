"""
Resource repository - published grief resources and pending submissions.
"""

from sqlalchemy import select

from solace.db.models.resource import Resource, ResourceSubmission
from solace.db.repositories.base_repository import BaseRepository


class ResourceRepository(BaseRepository[Resource]):
    def __init__(self, session):
        super().__init__(session, Resource)

    async def list_published(self, resource_type: str | None = None) -> list[Resource]:
        stmt = select(Resource).where(Resource.is_published.is_(True))
        if resource_type:
            stmt = stmt.where(Resource.resource_type == resource_type)
        result = await self.session.execute(
            stmt.order_by(Resource.is_featured.desc(), Resource.display_order, Resource.title)
        )
        return list(result.scalars().all())

    async def search_published(self, query: str, limit: int = 10) -> list[Resource]:
        pattern = f"%{query}%"
        result = await self.session.execute(
            select(Resource)
            .where(
                Resource.is_published.is_(True),
                Resource.title.ilike(pattern) | Resource.description.ilike(pattern),
            )
            .order_by(Resource.is_featured.desc(), Resource.title)
            .limit(limit)
        )
        return list(result.scalars().all())


class ResourceSubmissionRepository(BaseRepository[ResourceSubmission]):
    def __init__(self, session):
        super().__init__(session, ResourceSubmission)

    async def list_pending(self) -> list[ResourceSubmission]:
        result = await self.session.execute(select(ResourceSubmission).order_by(ResourceSubmission.created_at))
        return list(result.scalars().all())
