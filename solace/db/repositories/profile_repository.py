"""
Profile repository - member lookups for auth, directory search and admin listings.
"""

from sqlalchemy import select

from solace.db.models.profile import Profile
from solace.db.repositories.base_repository import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    def __init__(self, session):
        super().__init__(session, Profile)

    async def get_by_email(self, email: str) -> Profile | None:
        """Emails are stored lower-cased."""
        result = await self.session.execute(select(Profile).where(Profile.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_by_ids(self, ids: list[int]) -> dict[int, Profile]:
        if not ids:
            return {}
        result = await self.session.execute(select(Profile).where(Profile.id.in_(set(ids))))
        return {p.id: p for p in result.scalars().all()}

    async def get_by_stripe_customer(self, customer_id: str) -> Profile | None:
        result = await self.session.execute(select(Profile).where(Profile.stripe_customer_id == customer_id))
        return result.scalars().first()

    async def list_for_admin(
        self, *, verification_status: str | None = None, skip: int = 0, limit: int = 50
    ) -> list[Profile]:
        stmt = select(Profile)
        if verification_status:
            stmt = stmt.where(Profile.verification_status == verification_status)
        result = await self.session.execute(stmt.order_by(Profile.created_at.desc()).offset(skip).limit(limit))
        return list(result.scalars().all())

    async def search_directory(self, query: str, limit: int = 10) -> list[Profile]:
        """Members listed in the directory whose display name contains the query."""
        result = await self.session.execute(
            select(Profile)
            .where(
                Profile.show_in_directory.is_(True),
                Profile.is_banned.is_(False),
                Profile.display_name.ilike(f"%{query}%"),
            )
            .order_by(Profile.display_name)
            .limit(limit)
        )
        return list(result.scalars().all())
