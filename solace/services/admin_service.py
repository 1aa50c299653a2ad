"""
Admin service - dashboard counters and member management (verification tier, bans).
"""

import logging

from solace.core.clock import utcnow
from solace.core.enums import (
    MeetupStatus,
    OrganizerApplicationStatus,
    ReportStatus,
    ReviewStatus,
    VerificationStatus,
)
from solace.core.errors import InvalidRequestError, NotFoundError
from solace.db.models import (
    BackgroundCheckApplication,
    ForumTopic,
    Meetup,
    Memorial,
    OrganizerApplication,
    Profile,
    Report,
    VerificationRequest,
)
from solace.db.repositories.base_repository import BaseRepository
from solace.db.repositories.profile_repository import ProfileRepository
from solace.queue.publish import queue_index, queue_removal
from solace.search.documents import profile_doc

logger = logging.getLogger(__name__)

VERIFIED_STATUSES = (VerificationStatus.ID_VERIFIED.value, VerificationStatus.MEETUP_ORGANIZER.value)


class AdminService:
    """Admin dashboard: stats, member listing, verification levels and bans."""

    def __init__(self, profile_repo: ProfileRepository):
        self.profile_repo = profile_repo

    async def _count(self, model, *criteria) -> int:
        return await BaseRepository(self.profile_repo.session, model).count(*criteria)

    async def stats(self) -> dict[str, int]:
        """Headline counts for the admin dashboard."""
        return {
            "total_users": await self.profile_repo.count(),
            "verified_users": await self.profile_repo.count(Profile.verification_status.in_(VERIFIED_STATUSES)),
            "banned_users": await self.profile_repo.count(Profile.is_banned.is_(True)),
            "memorials": await self._count(Memorial),
            "published_meetups": await self._count(Meetup, Meetup.status == MeetupStatus.PUBLISHED.value),
            "forum_topics": await self._count(ForumTopic),
            "pending_reports": await self._count(Report, Report.status == ReportStatus.PENDING.value),
            "pending_organizer_applications": await self._count(
                OrganizerApplication,
                OrganizerApplication.status.in_(
                    [OrganizerApplicationStatus.PAYMENT_COMPLETE.value, OrganizerApplicationStatus.UNDER_REVIEW.value]
                ),
            ),
            "pending_background_checks": await self._count(
                BackgroundCheckApplication, BackgroundCheckApplication.status == ReviewStatus.PENDING.value
            ),
            "pending_verification_requests": await self._count(
                VerificationRequest, VerificationRequest.status == ReviewStatus.PENDING.value
            ),
        }

    async def list_users(self, verification_status: str | None, skip: int, limit: int) -> list[Profile]:
        """Page through members, optionally filtered by verification status."""
        return await self.profile_repo.list_for_admin(verification_status=verification_status, skip=skip, limit=limit)

    async def _get_user(self, user_id: int) -> Profile:
        profile = await self.profile_repo.get_by_id(user_id)
        if not profile:
            raise NotFoundError("User not found")
        return profile

    async def set_verification(self, user_id: int, status: VerificationStatus, admin: Profile) -> Profile:
        """Set a member's verification level, backfilling the timestamps the level implies."""
        profile = await self._get_user(user_id)
        now = utcnow()
        profile.verification_status = status.value
        # Stamp every tier the member now holds that was never stamped
        if status != VerificationStatus.UNVERIFIED and profile.email_verified_at is None:
            profile.email_verified_at = now
        if status.value in VERIFIED_STATUSES and profile.id_verified_at is None:
            profile.id_verified_at = now
            profile.id_verification_method = "manual"
        if status == VerificationStatus.MEETUP_ORGANIZER and profile.meetup_organizer_verified_at is None:
            profile.meetup_organizer_verified_at = now
        profile = await self.profile_repo.save(profile)
        logger.info("Admin %s set profile %s verification to %s", admin.id, profile.id, status.value)
        queue_index("users", profile_doc(profile))
        return profile

    async def ban(self, user_id: int, reason: str, admin: Profile) -> Profile:
        """Ban a member and drop them from the search index. Admins cannot ban themselves."""
        profile = await self._get_user(user_id)
        if profile.id == admin.id:
            raise InvalidRequestError("You cannot ban yourself")
        profile.is_banned = True
        profile.banned_at = utcnow()
        profile.ban_reason = reason
        profile = await self.profile_repo.save(profile)
        logger.info("Admin %s banned profile %s", admin.id, profile.id)
        queue_removal("users", profile.id)
        return profile

    async def unban(self, user_id: int, admin: Profile) -> Profile:
        """Lift a ban and re-index the member."""
        profile = await self._get_user(user_id)
        profile.is_banned = False
        profile.banned_at = None
        profile.ban_reason = None
        profile = await self.profile_repo.save(profile)
        logger.info("Admin %s lifted the ban on profile %s", admin.id, profile.id)
        queue_index("users", profile_doc(profile))
        return profile
