"""
Sponsor repository - sponsors, placements, impressions and advertising inquiries.
"""

from sqlalchemy import select

from solace.core.enums import SponsorStatus
from solace.db.models.sponsor import AdImpression, AdPlacement, AdvertisingInquiry, Sponsor
from solace.db.repositories.base_repository import BaseRepository


class SponsorRepository(BaseRepository[Sponsor]):
    def __init__(self, session):
        super().__init__(session, Sponsor)

    async def list_active(self, placement: str | None = None) -> list[Sponsor]:
        stmt = select(Sponsor).where(Sponsor.status == SponsorStatus.ACTIVE.value)
        if placement:
            placed = select(AdPlacement.sponsor_id).where(
                AdPlacement.location == placement, AdPlacement.is_active.is_(True)
            )
            stmt = stmt.where(Sponsor.id.in_(placed))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_all(self, status: str | None = None) -> list[Sponsor]:
        stmt = select(Sponsor)
        if status:
            stmt = stmt.where(Sponsor.status == status)
        result = await self.session.execute(stmt.order_by(Sponsor.created_at.desc()))
        return list(result.scalars().all())

    async def slug_exists(self, slug: str) -> bool:
        result = await self.session.execute(select(Sponsor.id).where(Sponsor.slug == slug).limit(1))
        return result.first() is not None


class AdPlacementRepository(BaseRepository[AdPlacement]):
    def __init__(self, session):
        super().__init__(session, AdPlacement)

    async def list_for_sponsor(self, sponsor_id: int) -> list[AdPlacement]:
        result = await self.session.execute(select(AdPlacement).where(AdPlacement.sponsor_id == sponsor_id))
        return list(result.scalars().all())


class AdImpressionRepository(BaseRepository[AdImpression]):
    def __init__(self, session):
        super().__init__(session, AdImpression)


class AdvertisingInquiryRepository(BaseRepository[AdvertisingInquiry]):
    def __init__(self, session):
        super().__init__(session, AdvertisingInquiry)

    async def list_by_status(self, status: str | None = None) -> list[AdvertisingInquiry]:
        stmt = select(AdvertisingInquiry)
        if status:
            stmt = stmt.where(AdvertisingInquiry.status == status)
        result = await self.session.execute(stmt.order_by(AdvertisingInquiry.created_at.desc()))
        return list(result.scalars().all())
