"""
Profile model - community member identity, verification tier, privacy, billing and background check.
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from solace.core.enums import (
    BackgroundCheckStatus,
    ProfileVisibility,
    SubscriptionTier,
    VerificationStatus,
)
from solace.db.base import Base, TimestampMixin


class Profile(TimestampMixin, Base):
    """A registered member. Credentials live here too (no separate auth service)."""

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(255))
    display_name: Mapped[str | None] = mapped_column(String(120), index=True)
    bio: Mapped[str | None] = mapped_column(Text)
    profile_image_url: Mapped[str | None] = mapped_column(String(500))

    # Emergency contact (shown to meetup organizers only)
    emergency_contact_name: Mapped[str | None] = mapped_column(String(255))
    emergency_contact_phone: Mapped[str | None] = mapped_column(String(50))
    emergency_contact_relationship: Mapped[str | None] = mapped_column(String(100))

    # Verification
    verification_status: Mapped[str] = mapped_column(
        String(32), default=VerificationStatus.UNVERIFIED.value, nullable=False, index=True
    )
    email_verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    id_verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    meetup_organizer_verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    id_verification_requested_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    id_verification_method: Mapped[str | None] = mapped_column(String(50))
    is_admin: Mapped[bool] = mapped_column(default=False, nullable=False)

    # Safety
    is_banned: Mapped[bool] = mapped_column(default=False, nullable=False)
    banned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    ban_reason: Mapped[str | None] = mapped_column(Text)

    # Privacy
    profile_visibility: Mapped[str] = mapped_column(
        String(32), default=ProfileVisibility.PUBLIC.value, nullable=False
    )
    allow_messages: Mapped[bool] = mapped_column(default=True, nullable=False)
    show_in_directory: Mapped[bool] = mapped_column(default=True, nullable=False)

    # Premium subscription
    subscription_tier: Mapped[str] = mapped_column(
        String(20), default=SubscriptionTier.FREE.value, nullable=False
    )
    subscription_status: Mapped[str | None] = mapped_column(String(32))
    stripe_customer_id: Mapped[str | None] = mapped_column(String(255), index=True)
    stripe_subscription_id: Mapped[str | None] = mapped_column(String(255))
    subscription_started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    subscription_ends_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    subscription_cancelled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    auto_renew: Mapped[bool] = mapped_column(default=False, nullable=False)

    # Background check (required to host gatherings)
    background_check_status: Mapped[str] = mapped_column(
        String(32), default=BackgroundCheckStatus.NOT_STARTED.value, nullable=False
    )
    background_check_submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    background_check_approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    background_check_expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    background_check_provider: Mapped[str | None] = mapped_column(String(50))
    background_check_notes: Mapped[str | None] = mapped_column(Text)

    @property
    def public_name(self) -> str:
        return self.display_name or self.full_name or "Community member"

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, email={self.email})>"
