"""
Security: password hashing and JWTs.
Access tokens authenticate requests; e-mail tokens carry purpose=email_verify and are only
accepted by the verification endpoint.
"""

from datetime import timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from solace.config import get_settings
from solace.core.clock import utcnow

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_PURPOSE = "access"
EMAIL_VERIFY_PURPOSE = "email_verify"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def _encode(subject: str | int, purpose: str, expires_in: timedelta, extra: dict[str, Any] | None = None) -> str:
    to_encode = {"sub": str(subject), "purpose": purpose, "exp": utcnow() + expires_in}
    if extra:
        to_encode.update(extra)
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def _decode(token: str, purpose: str) -> dict[str, Any] | None:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    if payload.get("purpose") != purpose or "sub" not in payload:
        return None
    return payload


def create_access_token(subject: str | int, extra: dict[str, Any] | None = None) -> str:
    """Create a bearer token for a profile id."""
    return _encode(subject, ACCESS_PURPOSE, timedelta(minutes=settings.jwt_expire_minutes), extra)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Payload of a valid, unexpired access token, else None."""
    return _decode(token, ACCESS_PURPOSE)


def create_email_verification_token(profile_id: int, email: str) -> str:
    return _encode(
        profile_id,
        EMAIL_VERIFY_PURPOSE,
        timedelta(hours=settings.email_token_expire_hours),
        {"email": email},
    )


def decode_email_verification_token(token: str) -> dict[str, Any] | None:
    return _decode(token, EMAIL_VERIFY_PURPOSE)
