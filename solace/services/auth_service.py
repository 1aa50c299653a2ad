"""
Auth service - registration, login and e-mail verification.
"""

import logging

from solace.config import get_settings
from solace.core.clock import utcnow
from solace.core.enums import VerificationStatus
from solace.core.errors import AuthenticationError, ConflictError, InvalidRequestError, PermissionDeniedError
from solace.core.security import (
    create_access_token,
    create_email_verification_token,
    decode_email_verification_token,
    hash_password,
    verify_password,
)
from solace.db.models.profile import Profile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.queue.publish import queue_email, queue_index
from solace.schemas.profile import LoginRequest, RegisterRequest
from solace.search.documents import profile_doc

logger = logging.getLogger(__name__)


def _verify_url(profile: Profile) -> str:
    token = create_email_verification_token(profile.id, profile.email)
    return f"{get_settings().site_url.rstrip('/')}/auth/verify-email?token={token}"


class AuthService:
    """Registration, login and e-mail verification."""

    def __init__(self, profile_repo: ProfileRepository):
        self.profile_repo = profile_repo

    async def register(self, data: RegisterRequest) -> Profile:
        """Create an unverified profile, queue the welcome e-mail and index the member."""
        email = data.email.lower()
        if await self.profile_repo.get_by_email(email):
            raise ConflictError("Email already registered")
        profile = await self.profile_repo.add(
            Profile(
                email=email,
                hashed_password=hash_password(data.password),
                full_name=data.full_name,
                display_name=data.display_name or data.full_name,
            )
        )
        logger.info("Registered profile %s", profile.id)
        queue_email(profile.email, "welcome", {"displayName": profile.public_name, "verifyUrl": _verify_url(profile)})
        queue_index("users", profile_doc(profile))
        return profile

    async def login(self, data: LoginRequest) -> str:
        """Check credentials and return an access token. Banned accounts are refused."""
        profile = await self.profile_repo.get_by_email(data.email)
        if not profile or not verify_password(data.password, profile.hashed_password):
            raise AuthenticationError("Invalid email or password")
        if profile.is_banned:
            raise PermissionDeniedError("Account suspended")
        return create_access_token(profile.id)

    async def verify_email(self, token: str) -> Profile:
        """Consume an e-mail verification token and promote the profile to email_verified."""
        payload = decode_email_verification_token(token)
        if not payload:
            raise InvalidRequestError("Invalid or expired verification token")
        profile = await self.profile_repo.get_by_id(int(payload["sub"]))
        if not profile or profile.email != payload.get("email"):
            raise InvalidRequestError("Invalid or expired verification token")
        if profile.verification_status == VerificationStatus.UNVERIFIED.value:
            profile.verification_status = VerificationStatus.EMAIL_VERIFIED.value
            profile.email_verified_at = utcnow()
            profile = await self.profile_repo.save(profile)
            logger.info("Profile %s verified e-mail", profile.id)
        return profile

    async def resend_verification(self, profile: Profile) -> None:
        """Queue a fresh verification e-mail for an unverified profile."""
        if profile.verification_status != VerificationStatus.UNVERIFIED.value:
            raise ConflictError("Email already verified")
        queue_email(profile.email, "verify_email", {"displayName": profile.public_name, "verifyUrl": _verify_url(profile)})
