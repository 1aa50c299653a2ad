"""
Profile service - public/private views, privacy rules, account status and
ID verification requests.
"""

import logging

from solace.core import permissions
from solace.core.clock import ensure_aware, utcnow
from solace.core.enums import (
    BackgroundCheckStatus,
    ProfileVisibility,
    ReviewStatus,
    SubscriptionTier,
    VerificationRequestType,
    VerificationStatus,
)
from solace.core.errors import ConflictError, NotFoundError, PermissionDeniedError
from solace.db.models.profile import Profile
from solace.db.models.verification import VerificationRequest
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.verification_repository import VerificationRequestRepository
from solace.queue.publish import queue_index
from solace.schemas.profile import ProfileUpdate, VerificationRequestCreate
from solace.search.documents import profile_doc

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {"profile_visibility", "allow_messages", "show_in_directory"}


def is_premium(profile: Profile) -> bool:
    return (
        profile.subscription_tier == SubscriptionTier.PREMIUM.value
        and profile.subscription_status == "active"
    )


def background_check_expired(profile: Profile) -> bool:
    expires_at = ensure_aware(profile.background_check_expires_at)
    return expires_at is not None and expires_at < utcnow()


def can_host_gatherings(profile: Profile) -> bool:
    """Premium membership plus an approved, unexpired background check."""
    return (
        is_premium(profile)
        and profile.background_check_status == BackgroundCheckStatus.APPROVED.value
        and not background_check_expired(profile)
    )


def can_view_profile(profile: Profile, viewer: Profile | None) -> bool:
    if viewer is not None and (viewer.id == profile.id or viewer.is_admin):
        return True
    if profile.is_banned:
        return False
    if profile.profile_visibility == ProfileVisibility.PRIVATE.value:
        return False
    if profile.profile_visibility == ProfileVisibility.VERIFIED_MEMBERS.value:
        return viewer is not None and permissions.has_level(
            viewer.verification_status, VerificationStatus.ID_VERIFIED
        )
    return True


class ProfileService:
    """The member's own profile and what others may see of it."""

    def __init__(self, profile_repo: ProfileRepository, request_repo: VerificationRequestRepository):
        self.profile_repo = profile_repo
        self.request_repo = request_repo

    async def get_visible(self, profile_id: int, viewer: Profile | None) -> Profile:
        """Another member's profile, honoring their visibility setting."""
        profile = await self.profile_repo.get_by_id(profile_id)
        if not profile or not can_view_profile(profile, viewer):
            raise NotFoundError("Profile not found")
        return profile

    async def update(self, profile: Profile, data: ProfileUpdate) -> Profile:
        """Apply a partial update. Nulls for required settings leave them unchanged."""
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field not in REQUIRED_FIELDS
        }
        for field, value in changes.items():
            setattr(profile, field, value.value if hasattr(value, "value") else value)
        profile = await self.profile_repo.save(profile)
        if {"display_name", "bio", "profile_image_url"} & changes.keys():
            queue_index("users", profile_doc(profile))
        return profile

    def account_status(self, profile: Profile) -> dict:
        """Verification level and what it unlocks."""
        level = permissions.level_for(profile.verification_status)
        return {
            "verification": {
                "status": level.status.value,
                "label": level.label,
                "description": level.description,
                "badge": level.badge,
                "can_browse": level.can_browse,
                "can_post": level.can_post,
                "can_message": level.can_message,
                "can_join_meetups": level.can_join_meetups,
                "can_create_meetups": level.can_create_meetups,
                "next_step": level.next_step,
            },
            "is_premium": is_premium(profile),
            "subscription_status": profile.subscription_status,
            "subscription_ends_at": profile.subscription_ends_at,
            "background_check": {
                "status": profile.background_check_status or BackgroundCheckStatus.NOT_STARTED.value,
                "approved_at": profile.background_check_approved_at,
                "expires_at": profile.background_check_expires_at,
                "is_expired": background_check_expired(profile),
                "notes": profile.background_check_notes,
            },
            "can_host_gatherings": can_host_gatherings(profile),
        }

    async def request_id_verification(self, profile: Profile, data: VerificationRequestCreate) -> VerificationRequest:
        """Queue a manual ID verification request."""
        if not permissions.has_level(profile.verification_status, VerificationStatus.EMAIL_VERIFIED):
            raise PermissionDeniedError("Email verification required")
        if permissions.has_level(profile.verification_status, VerificationStatus.ID_VERIFIED):
            raise ConflictError("Your identity is already verified")
        request_type = VerificationRequestType.ID_VERIFICATION.value
        if await self.request_repo.get_pending_for_user(profile.id, request_type):
            raise ConflictError("You already have a pending verification request")
        request = await self.request_repo.add(
            VerificationRequest(
                user_id=profile.id,
                request_type=request_type,
                status=ReviewStatus.PENDING.value,
                submitted_info={
                    "full_name": data.full_name,
                    "reason": data.reason,
                    "about_me": data.about_me,
                },
            )
        )
        profile.id_verification_requested_at = utcnow()
        await self.profile_repo.save(profile)
        logger.info("Profile %s requested ID verification (request %s)", profile.id, request.id)
        return request
