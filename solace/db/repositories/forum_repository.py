"""
Forum repository - categories, topics, posts, subscriptions and likes.
"""

from sqlalchemy import select

from solace.db.models.forum import ForumCategory, ForumPost, ForumPostLike, ForumSubscription, ForumTopic
from solace.db.repositories.base_repository import BaseRepository


class ForumCategoryRepository(BaseRepository[ForumCategory]):
    def __init__(self, session):
        super().__init__(session, ForumCategory)

    async def list_active(self) -> list[ForumCategory]:
        result = await self.session.execute(
            select(ForumCategory)
            .where(ForumCategory.is_active.is_(True))
            .order_by(ForumCategory.display_order, ForumCategory.name)
        )
        return list(result.scalars().all())

    async def get_by_slug(self, slug: str) -> ForumCategory | None:
        result = await self.session.execute(select(ForumCategory).where(ForumCategory.slug == slug))
        return result.scalar_one_or_none()


class ForumTopicRepository(BaseRepository[ForumTopic]):
    def __init__(self, session):
        super().__init__(session, ForumTopic)

    async def list_for_category(self, category_id: int, skip: int = 0, limit: int = 20) -> list[ForumTopic]:
        """Pinned topics first, then most recently active."""
        result = await self.session.execute(
            select(ForumTopic)
            .where(ForumTopic.category_id == category_id)
            .order_by(ForumTopic.is_pinned.desc(), ForumTopic.last_post_at.desc(), ForumTopic.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def slug_exists(self, category_id: int, slug: str) -> bool:
        result = await self.session.execute(
            select(ForumTopic.id).where(ForumTopic.category_id == category_id, ForumTopic.slug == slug).limit(1)
        )
        return result.first() is not None

    async def get_by_ids(self, ids: list[int]) -> dict[int, ForumTopic]:
        if not ids:
            return {}
        result = await self.session.execute(select(ForumTopic).where(ForumTopic.id.in_(set(ids))))
        return {t.id: t for t in result.scalars().all()}

    async def search(self, query: str, limit: int = 10) -> list[ForumTopic]:
        result = await self.session.execute(
            select(ForumTopic)
            .where(ForumTopic.title.ilike(f"%{query}%"))
            .order_by(ForumTopic.last_post_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())


class ForumPostRepository(BaseRepository[ForumPost]):
    def __init__(self, session):
        super().__init__(session, ForumPost)

    async def list_for_topic(self, topic_id: int, include_hidden: bool = False) -> list[ForumPost]:
        stmt = select(ForumPost).where(ForumPost.topic_id == topic_id)
        if not include_hidden:
            stmt = stmt.where(ForumPost.is_hidden.is_(False))
        result = await self.session.execute(stmt.order_by(ForumPost.created_at, ForumPost.id))
        return list(result.scalars().all())


class ForumSubscriptionRepository(BaseRepository[ForumSubscription]):
    def __init__(self, session):
        super().__init__(session, ForumSubscription)

    async def get_for_user(self, user_id: int, topic_id: int) -> ForumSubscription | None:
        result = await self.session.execute(
            select(ForumSubscription).where(ForumSubscription.user_id == user_id, ForumSubscription.topic_id == topic_id)
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: int) -> list[ForumSubscription]:
        result = await self.session.execute(
            select(ForumSubscription)
            .where(ForumSubscription.user_id == user_id)
            .order_by(ForumSubscription.created_at.desc())
        )
        return list(result.scalars().all())

    async def subscriber_ids(self, topic_id: int) -> list[int]:
        result = await self.session.execute(
            select(ForumSubscription.user_id).where(ForumSubscription.topic_id == topic_id)
        )
        return list(result.scalars().all())


class ForumPostLikeRepository(BaseRepository[ForumPostLike]):
    def __init__(self, session):
        super().__init__(session, ForumPostLike)

    async def get_for_user(self, user_id: int, post_id: int) -> ForumPostLike | None:
        result = await self.session.execute(
            select(ForumPostLike).where(ForumPostLike.user_id == user_id, ForumPostLike.post_id == post_id)
        )
        return result.scalar_one_or_none()
