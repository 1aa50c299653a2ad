"""
Memorial repository - pages, slugs, tributes, candles and gifts shown on a page.
"""

from datetime import datetime

from sqlalchemy import or_, select

from solace.db.models.memorial import Memorial, MemorialCandle, MemorialStoreItem, MemorialTribute
from solace.db.repositories.base_repository import BaseRepository


class MemorialRepository(BaseRepository[Memorial]):
    def __init__(self, session):
        super().__init__(session, Memorial)

    async def get_by_slug(self, slug: str) -> Memorial | None:
        result = await self.session.execute(select(Memorial).where(Memorial.slug == slug))
        return result.scalar_one_or_none()

    async def slug_taken(self, slug: str, exclude_id: int | None = None) -> bool:
        stmt = select(Memorial.id).where(Memorial.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(Memorial.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def slugs_with_prefix(self, base: str) -> set[str]:
        result = await self.session.execute(
            select(Memorial.slug).where(or_(Memorial.slug == base, Memorial.slug.like(f"{base}-%")))
        )
        return set(result.scalars().all())

    async def list_public(self, skip: int = 0, limit: int = 20) -> list[Memorial]:
        result = await self.session.execute(
            select(Memorial)
            .where(Memorial.is_public.is_(True))
            .order_by(Memorial.created_at.desc(), Memorial.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_by_creator(self, user_id: int) -> list[Memorial]:
        result = await self.session.execute(
            select(Memorial).where(Memorial.created_by == user_id).order_by(Memorial.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_existing_ids(self, ids: list[int]) -> set[int]:
        if not ids:
            return set()
        result = await self.session.execute(select(Memorial.id).where(Memorial.id.in_(set(ids))))
        return set(result.scalars().all())

    async def search_public(self, query: str, limit: int = 10) -> list[Memorial]:
        pattern = f"%{query}%"
        result = await self.session.execute(
            select(Memorial)
            .where(
                Memorial.is_public.is_(True),
                or_(
                    Memorial.first_name.ilike(pattern),
                    Memorial.last_name.ilike(pattern),
                    Memorial.nickname.ilike(pattern),
                ),
            )
            .order_by(Memorial.last_name, Memorial.first_name)
            .limit(limit)
        )
        return list(result.scalars().all())


class MemorialTributeRepository(BaseRepository[MemorialTribute]):
    def __init__(self, session):
        super().__init__(session, MemorialTribute)

    async def list_visible(self, memorial_id: int) -> list[MemorialTribute]:
        result = await self.session.execute(
            select(MemorialTribute)
            .where(MemorialTribute.memorial_id == memorial_id, MemorialTribute.is_hidden.is_(False))
            .order_by(MemorialTribute.created_at.desc(), MemorialTribute.id.desc())
        )
        return list(result.scalars().all())


class MemorialStoreItemRepository(BaseRepository[MemorialStoreItem]):
    def __init__(self, session):
        super().__init__(session, MemorialStoreItem)

    async def list_visible(self, memorial_id: int) -> list[MemorialStoreItem]:
        result = await self.session.execute(
            select(MemorialStoreItem)
            .where(MemorialStoreItem.memorial_id == memorial_id, MemorialStoreItem.is_visible.is_(True))
            .order_by(MemorialStoreItem.display_order, MemorialStoreItem.created_at.desc())
        )
        return list(result.scalars().all())

    async def exists_for_order_items(self, order_item_ids: list[int]) -> set[int]:
        if not order_item_ids:
            return set()
        result = await self.session.execute(
            select(MemorialStoreItem.order_item_id).where(MemorialStoreItem.order_item_id.in_(order_item_ids))
        )
        return set(result.scalars().all())


class MemorialCandleRepository(BaseRepository[MemorialCandle]):
    def __init__(self, session):
        super().__init__(session, MemorialCandle)

    async def list_burning(self, memorial_id: int, now: datetime, limit: int = 10) -> list[MemorialCandle]:
        result = await self.session.execute(
            select(MemorialCandle)
            .where(MemorialCandle.memorial_id == memorial_id, MemorialCandle.expires_at > now)
            .order_by(MemorialCandle.created_at.desc(), MemorialCandle.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_burning(self, memorial_id: int, now: datetime) -> int:
        return await self.count(MemorialCandle.memorial_id == memorial_id, MemorialCandle.expires_at > now)
