"""
Auth endpoints - registration, login and e-mail verification.
"""

from fastapi import APIRouter, status

from solace.core.dependencies import CurrentProfile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.session import DbSession
from solace.schemas.profile import (
    LoginRequest,
    ProfilePrivate,
    RegisterRequest,
    TokenResponse,
    VerifyEmailRequest,
)
from solace.services.auth_service import AuthService

router = APIRouter()


def _get_auth_service(session: DbSession) -> AuthService:
    return AuthService(ProfileRepository(session))


@router.post("/register", response_model=ProfilePrivate, status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, data: RegisterRequest):
    """Create an unverified member and send the welcome e-mail with a verification link."""
    return await _get_auth_service(session).register(data)


@router.post("/login", response_model=TokenResponse)
async def login(session: DbSession, data: LoginRequest):
    token = await _get_auth_service(session).login(data)
    return TokenResponse(access_token=token)


@router.post("/verify-email", response_model=ProfilePrivate)
async def verify_email(session: DbSession, data: VerifyEmailRequest):
    return await _get_auth_service(session).verify_email(data.token)


@router.post("/resend-verification")
async def resend_verification(session: DbSession, profile: CurrentProfile):
    await _get_auth_service(session).resend_verification(profile)
    return {"success": True}


@router.get("/me", response_model=ProfilePrivate)
async def me(profile: CurrentProfile):
    return profile
