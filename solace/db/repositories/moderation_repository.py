"""
Moderation repository - content reports and feature suggestions.
"""

from sqlalchemy import select

from solace.db.models.moderation import FeatureSuggestion, Report, SuggestionUpvote
from solace.db.repositories.base_repository import BaseRepository


class ReportRepository(BaseRepository[Report]):
    def __init__(self, session):
        super().__init__(session, Report)

    async def list_by_status(self, status: str | None = None, skip: int = 0, limit: int = 50) -> list[Report]:
        stmt = select(Report)
        if status:
            stmt = stmt.where(Report.status == status)
        result = await self.session.execute(stmt.order_by(Report.created_at.desc()).offset(skip).limit(limit))
        return list(result.scalars().all())


class SuggestionRepository(BaseRepository[FeatureSuggestion]):
    def __init__(self, session):
        super().__init__(session, FeatureSuggestion)

    async def list_sorted(
        self, *, status: str | None = None, sort: str = "upvotes", limit: int = 50
    ) -> list[FeatureSuggestion]:
        stmt = select(FeatureSuggestion)
        if status:
            stmt = stmt.where(FeatureSuggestion.status == status)
        if sort == "recent":
            stmt = stmt.order_by(FeatureSuggestion.created_at.desc(), FeatureSuggestion.id.desc())
        else:
            stmt = stmt.order_by(FeatureSuggestion.upvote_count.desc(), FeatureSuggestion.created_at.desc())
        result = await self.session.execute(stmt.limit(limit))
        return list(result.scalars().all())


class SuggestionUpvoteRepository(BaseRepository[SuggestionUpvote]):
    def __init__(self, session):
        super().__init__(session, SuggestionUpvote)

    async def get_for_user(self, suggestion_id: int, user_id: int) -> SuggestionUpvote | None:
        result = await self.session.execute(
            select(SuggestionUpvote).where(
                SuggestionUpvote.suggestion_id == suggestion_id, SuggestionUpvote.user_id == user_id
            )
        )
        return result.scalar_one_or_none()

    async def voted_ids(self, user_id: int, suggestion_ids: list[int]) -> set[int]:
        if not suggestion_ids:
            return set()
        result = await self.session.execute(
            select(SuggestionUpvote.suggestion_id).where(
                SuggestionUpvote.user_id == user_id, SuggestionUpvote.suggestion_id.in_(suggestion_ids)
            )
        )
        return set(result.scalars().all())
