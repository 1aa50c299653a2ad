"""
Meetup repository - upcoming listings, RSVPs and attendee counts.
"""

from datetime import datetime

from sqlalchemy import func, select

from solace.core.enums import MeetupStatus, RsvpStatus
from solace.db.models.meetup import Meetup, MeetupRsvp
from solace.db.repositories.base_repository import BaseRepository


class MeetupRepository(BaseRepository[Meetup]):
    def __init__(self, session):
        super().__init__(session, Meetup)

    async def list_upcoming(
        self, *, after: datetime, format: str | None = None, city: str | None = None
    ) -> list[Meetup]:
        stmt = select(Meetup).where(Meetup.status == MeetupStatus.PUBLISHED.value, Meetup.start_time >= after)
        if format:
            stmt = stmt.where(Meetup.format == format)
        if city:
            stmt = stmt.where(Meetup.location_city.ilike(city))
        result = await self.session.execute(stmt.order_by(Meetup.start_time, Meetup.id))
        return list(result.scalars().all())

    async def list_by_organizer(self, organizer_id: int) -> list[Meetup]:
        result = await self.session.execute(
            select(Meetup).where(Meetup.organizer_id == organizer_id).order_by(Meetup.start_time.desc())
        )
        return list(result.scalars().all())

    async def list_all(self, status: str | None = None, skip: int = 0, limit: int = 50) -> list[Meetup]:
        stmt = select(Meetup)
        if status:
            stmt = stmt.where(Meetup.status == status)
        result = await self.session.execute(stmt.order_by(Meetup.start_time.desc()).offset(skip).limit(limit))
        return list(result.scalars().all())

    async def search_published(self, query: str, limit: int = 10) -> list[Meetup]:
        result = await self.session.execute(
            select(Meetup)
            .where(Meetup.status == MeetupStatus.PUBLISHED.value, Meetup.title.ilike(f"%{query}%"))
            .order_by(Meetup.start_time)
            .limit(limit)
        )
        return list(result.scalars().all())


class MeetupRsvpRepository(BaseRepository[MeetupRsvp]):
    def __init__(self, session):
        super().__init__(session, MeetupRsvp)

    async def get_for_user(self, meetup_id: int, user_id: int) -> MeetupRsvp | None:
        result = await self.session.execute(
            select(MeetupRsvp).where(MeetupRsvp.meetup_id == meetup_id, MeetupRsvp.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def count_attending(self, meetup_id: int) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(MeetupRsvp)
            .where(MeetupRsvp.meetup_id == meetup_id, MeetupRsvp.status == RsvpStatus.ATTENDING.value)
        )
        return int(result.scalar_one())

    async def oldest_waitlisted(self, meetup_id: int) -> MeetupRsvp | None:
        result = await self.session.execute(
            select(MeetupRsvp)
            .where(MeetupRsvp.meetup_id == meetup_id, MeetupRsvp.status == RsvpStatus.WAITLIST.value)
            .order_by(MeetupRsvp.created_at, MeetupRsvp.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_for_meetup(self, meetup_id: int) -> list[MeetupRsvp]:
        result = await self.session.execute(
            select(MeetupRsvp).where(MeetupRsvp.meetup_id == meetup_id).order_by(MeetupRsvp.created_at)
        )
        return list(result.scalars().all())
