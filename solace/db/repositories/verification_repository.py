"""
Repositories for the review workflows: ID verification requests, organizer applications
and background checks.
"""

from sqlalchemy import select

from solace.db.models.verification import (
    BackgroundCheckApplication,
    OrganizerApplication,
    VerificationRequest,
)
from solace.db.repositories.base_repository import BaseRepository


class VerificationRequestRepository(BaseRepository[VerificationRequest]):
    def __init__(self, session):
        super().__init__(session, VerificationRequest)

    async def get_pending_for_user(self, user_id: int, request_type: str) -> VerificationRequest | None:
        result = await self.session.execute(
            select(VerificationRequest)
            .where(
                VerificationRequest.user_id == user_id,
                VerificationRequest.request_type == request_type,
                VerificationRequest.status == "pending",
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_status(self, status: str) -> list[VerificationRequest]:
        result = await self.session.execute(
            select(VerificationRequest)
            .where(VerificationRequest.status == status)
            .order_by(VerificationRequest.created_at)
        )
        return list(result.scalars().all())


class OrganizerApplicationRepository(BaseRepository[OrganizerApplication]):
    def __init__(self, session):
        super().__init__(session, OrganizerApplication)

    async def list_for_user(self, user_id: int) -> list[OrganizerApplication]:
        result = await self.session.execute(
            select(OrganizerApplication)
            .where(OrganizerApplication.user_id == user_id)
            .order_by(OrganizerApplication.created_at.desc(), OrganizerApplication.id.desc())
        )
        return list(result.scalars().all())

    async def get_open_for_user(self, user_id: int, open_statuses: list[str]) -> OrganizerApplication | None:
        result = await self.session.execute(
            select(OrganizerApplication)
            .where(OrganizerApplication.user_id == user_id, OrganizerApplication.status.in_(open_statuses))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_statuses(self, statuses: list[str]) -> list[OrganizerApplication]:
        result = await self.session.execute(
            select(OrganizerApplication)
            .where(OrganizerApplication.status.in_(statuses))
            .order_by(OrganizerApplication.paid_at, OrganizerApplication.id)
        )
        return list(result.scalars().all())


class BackgroundCheckRepository(BaseRepository[BackgroundCheckApplication]):
    def __init__(self, session):
        super().__init__(session, BackgroundCheckApplication)

    async def get_latest_for_user(self, user_id: int) -> BackgroundCheckApplication | None:
        result = await self.session.execute(
            select(BackgroundCheckApplication)
            .where(BackgroundCheckApplication.user_id == user_id)
            .order_by(BackgroundCheckApplication.created_at.desc(), BackgroundCheckApplication.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_status(self, status: str | None = None) -> list[BackgroundCheckApplication]:
        stmt = select(BackgroundCheckApplication)
        if status:
            stmt = stmt.where(BackgroundCheckApplication.status == status)
        result = await self.session.execute(stmt.order_by(BackgroundCheckApplication.created_at.desc()))
        return list(result.scalars().all())
