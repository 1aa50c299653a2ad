"""
Background check service. A manual review for now; approval is valid for
settings.background_check_valid_days and is mirrored onto the profile.
"""

import logging
from datetime import timedelta

from solace.config import get_settings
from solace.core.clock import utcnow
from solace.core.enums import BackgroundCheckStatus, ReviewStatus
from solace.core.errors import ConflictError, InvalidRequestError, NotFoundError
from solace.db.models.profile import Profile
from solace.db.models.verification import BackgroundCheckApplication
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.verification_repository import BackgroundCheckRepository
from solace.schemas.verification import BackgroundCheckApply

logger = logging.getLogger(__name__)

PROVIDER = "manual"


class BackgroundCheckService:
    """Background check applications and their review."""

    def __init__(self, check_repo: BackgroundCheckRepository, profile_repo: ProfileRepository):
        self.check_repo = check_repo
        self.profile_repo = profile_repo

    async def apply(self, profile: Profile, data: BackgroundCheckApply) -> BackgroundCheckApplication:
        """Record a background check application unless one is pending or approved."""
        latest = await self.check_repo.get_latest_for_user(profile.id)
        if latest and latest.status in (ReviewStatus.PENDING.value, ReviewStatus.APPROVED.value):
            raise ConflictError(f"You already have a {latest.status} background check application")
        application = await self.check_repo.add(
            BackgroundCheckApplication(
                user_id=profile.id,
                status=ReviewStatus.PENDING.value,
                provider=PROVIDER,
                **data.model_dump(),
            )
        )
        profile.background_check_status = BackgroundCheckStatus.PENDING.value
        profile.background_check_submitted_at = utcnow()
        await self.profile_repo.save(profile)
        logger.info("Profile %s applied for a background check (%s)", profile.id, application.id)
        return application

    async def list_applications(self, status: str | None = None) -> list[BackgroundCheckApplication]:
        """Applications for the admin queue, optionally by status."""
        return await self.check_repo.list_by_status(status)

    async def _get_pending(self, application_id: int) -> BackgroundCheckApplication:
        application = await self.check_repo.get_by_id(application_id)
        if not application:
            raise NotFoundError("Application not found")
        if application.status != ReviewStatus.PENDING.value:
            raise ConflictError(f"Application is already {application.status}")
        return application

    async def approve(self, application_id: int, admin_notes: str | None = None) -> BackgroundCheckApplication:
        """Approve a pending application and mark the member as background checked."""
        application = await self._get_pending(application_id)
        now = utcnow()
        expires_at = now + timedelta(days=get_settings().background_check_valid_days)
        application.status = ReviewStatus.APPROVED.value
        application.approved_at = now
        application.reviewed_at = now
        application.expires_at = expires_at
        application.admin_notes = admin_notes
        profile = await self.profile_repo.get_by_id(application.user_id)
        if profile:
            profile.background_check_status = BackgroundCheckStatus.APPROVED.value
            profile.background_check_approved_at = now
            profile.background_check_expires_at = expires_at
            profile.background_check_provider = application.provider
            profile.background_check_notes = admin_notes
            await self.profile_repo.save(profile)
        application = await self.check_repo.save(application)
        logger.info("Background check %s approved until %s", application.id, expires_at.date())
        return application

    async def reject(
        self, application_id: int, rejection_reason: str | None, admin_notes: str | None = None
    ) -> BackgroundCheckApplication:
        """Reject a pending application. A reason is required."""
        if not rejection_reason or not rejection_reason.strip():
            raise InvalidRequestError("Rejection reason is required")
        application = await self._get_pending(application_id)
        application.status = ReviewStatus.REJECTED.value
        application.rejection_reason = rejection_reason
        application.admin_notes = admin_notes
        application.reviewed_at = utcnow()
        profile = await self.profile_repo.get_by_id(application.user_id)
        if profile:
            profile.background_check_status = BackgroundCheckStatus.REJECTED.value
            profile.background_check_notes = rejection_reason
            await self.profile_repo.save(profile)
        application = await self.check_repo.save(application)
        logger.info("Background check %s rejected", application.id)
        return application
