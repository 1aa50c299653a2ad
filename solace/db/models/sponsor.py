"""
Sponsor / advertising models.
"""

from datetime import date, datetime

from sqlalchemy import JSON, Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from solace.core.clock import utcnow
from solace.core.enums import InquiryStatus, SponsorStatus
from solace.db.base import Base, TimestampMixin


class Sponsor(TimestampMixin, Base):
    __tablename__ = "sponsors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(120), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    logo_url: Mapped[str | None] = mapped_column(String(500))
    website_url: Mapped[str] = mapped_column(String(500), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_name: Mapped[str | None] = mapped_column(String(255))
    tier: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default=SponsorStatus.PENDING.value, nullable=False, index=True)
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    monthly_rate_cents: Mapped[int | None] = mapped_column()
    display_order: Mapped[int] = mapped_column(default=0, nullable=False)
    show_on_homepage: Mapped[bool] = mapped_column(default=False, nullable=False)
    tagline: Mapped[str | None] = mapped_column(String(255))
    categories: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    total_impressions: Mapped[int] = mapped_column(default=0, nullable=False)
    total_clicks: Mapped[int] = mapped_column(default=0, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    approved_by: Mapped[int | None] = mapped_column(ForeignKey("profiles.id"))
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))


class AdPlacement(TimestampMixin, Base):
    __tablename__ = "ad_placements"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    sponsor_id: Mapped[int] = mapped_column(ForeignKey("sponsors.id", ondelete="CASCADE"), index=True)
    location: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)


class AdImpression(Base):
    __tablename__ = "ad_impressions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    sponsor_id: Mapped[int] = mapped_column(ForeignKey("sponsors.id", ondelete="CASCADE"), index=True)
    location: Mapped[str] = mapped_column(String(32), nullable=False)
    user_id: Mapped[int | None] = mapped_column(ForeignKey("profiles.id"))
    # SHA-256 of the forwarded client address; the raw IP is never stored
    ip_hash: Mapped[str | None] = mapped_column(String(64))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)


class AdvertisingInquiry(TimestampMixin, Base):
    __tablename__ = "advertising_inquiries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50))
    website_url: Mapped[str | None] = mapped_column(String(500))
    company_description: Mapped[str] = mapped_column(Text, nullable=False)
    interested_tiers: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    interested_placements: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    budget_range: Mapped[str | None] = mapped_column(String(64))
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default=InquiryStatus.NEW.value, nullable=False, index=True)
    admin_notes: Mapped[str | None] = mapped_column(Text)
    responded_by: Mapped[int | None] = mapped_column(ForeignKey("profiles.id"))
    responded_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
