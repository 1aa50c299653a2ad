"""
Verification service - admin review of ID / organizer verification requests.
"""

import logging

from solace.core.clock import utcnow
from solace.core.enums import ReviewStatus, VerificationRequestType, VerificationStatus
from solace.core.errors import ConflictError, NotFoundError
from solace.db.models.profile import Profile
from solace.db.models.verification import VerificationRequest
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.verification_repository import VerificationRequestRepository
from solace.queue.publish import queue_email

logger = logging.getLogger(__name__)


class VerificationService:
    """Manual verification requests."""

    def __init__(self, request_repo: VerificationRequestRepository, profile_repo: ProfileRepository):
        self.request_repo = request_repo
        self.profile_repo = profile_repo

    async def list_pending(self) -> list[VerificationRequest]:
        """Pending verification requests."""
        return await self.request_repo.list_by_status(ReviewStatus.PENDING.value)

    async def _get_pending(self, request_id: int) -> VerificationRequest:
        request = await self.request_repo.get_by_id(request_id)
        if not request:
            raise NotFoundError("Verification request not found")
        if request.status != ReviewStatus.PENDING.value:
            raise ConflictError(f"Request is already {request.status}")
        return request

    async def approve(self, request_id: int, admin: Profile, admin_notes: str | None = None) -> VerificationRequest:
        """Approve a request and raise the member's verification level."""
        request = await self._get_pending(request_id)
        profile = await self.profile_repo.get_by_id(request.user_id)
        if not profile:
            raise NotFoundError("Profile not found")
        now = utcnow()
        if request.request_type == VerificationRequestType.MEETUP_ORGANIZER.value:
            profile.verification_status = VerificationStatus.MEETUP_ORGANIZER.value
            profile.meetup_organizer_verified_at = now
        else:
            profile.verification_status = VerificationStatus.ID_VERIFIED.value
            profile.id_verified_at = now
            profile.id_verification_method = "manual"
        request.status = ReviewStatus.APPROVED.value
        request.reviewed_by = admin.id
        request.reviewed_at = now
        request.admin_notes = admin_notes
        await self.profile_repo.save(profile)
        request = await self.request_repo.save(request)
        logger.info("Admin %s approved verification request %s for profile %s", admin.id, request.id, profile.id)
        queue_email(profile.email, "account_verified", {"displayName": profile.public_name})
        return request

    async def reject(
        self, request_id: int, admin: Profile, reason: str, admin_notes: str | None = None
    ) -> VerificationRequest:
        """Reject a pending request with a reason."""
        request = await self._get_pending(request_id)
        request.status = ReviewStatus.REJECTED.value
        request.rejection_reason = reason
        request.admin_notes = admin_notes
        request.reviewed_by = admin.id
        request.reviewed_at = utcnow()
        request = await self.request_repo.save(request)
        logger.info("Admin %s rejected verification request %s", admin.id, request.id)
        return request
