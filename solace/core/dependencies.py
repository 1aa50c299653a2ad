"""
FastAPI dependencies - authentication and verification-tier gates.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from solace.core import permissions
from solace.core.enums import VerificationStatus
from solace.core.security import decode_access_token
from solace.db.models.profile import Profile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.session import DbSession

security = HTTPBearer(auto_error=False)


async def get_current_profile(
    session: DbSession,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Profile:
    """Resolve the bearer token to a profile. 401 if missing or invalid, 403 if banned."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
    profile = await ProfileRepository(session).get_by_id(int(payload["sub"]))
    if not profile:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    if profile.is_banned:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account suspended")
    return profile


async def get_optional_profile(
    session: DbSession,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Profile | None:
    """Profile for a valid token, else None. For public pages that show more to members."""
    if not credentials:
        return None
    payload = decode_access_token(credentials.credentials)
    if not payload:
        return None
    profile = await ProfileRepository(session).get_by_id(int(payload["sub"]))
    if profile is None or profile.is_banned:
        return None
    return profile


CurrentProfile = Annotated[Profile, Depends(get_current_profile)]
OptionalProfile = Annotated[Profile | None, Depends(get_optional_profile)]


async def require_admin(profile: CurrentProfile) -> Profile:
    if not profile.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return profile


AdminProfile = Annotated[Profile, Depends(require_admin)]


def require_verification(required: VerificationStatus, message: str | None = None):
    """Dependency factory: 403 unless the caller is at `required` or above (admins pass)."""
    level = permissions.VERIFICATION_LEVELS[required]

    async def dependency(profile: CurrentProfile) -> Profile:
        if profile.is_admin or permissions.has_level(profile.verification_status, required):
            return profile
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=message or f"{level.label} status required",
        )

    return dependency


EmailVerifiedProfile = Annotated[Profile, Depends(require_verification(VerificationStatus.EMAIL_VERIFIED))]
IdVerifiedProfile = Annotated[Profile, Depends(require_verification(VerificationStatus.ID_VERIFIED))]
