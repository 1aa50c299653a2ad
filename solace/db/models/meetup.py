"""
Meetup models - in-person / virtual gatherings and member RSVPs.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from solace.core.enums import MeetupStatus
from solace.db.base import Base, TimestampMixin


class Meetup(TimestampMixin, Base):
    __tablename__ = "meetups"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    organizer_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    loss_categories: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    format: Mapped[str] = mapped_column(String(20), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    timezone: Mapped[str] = mapped_column(String(64), default="UTC", nullable=False)

    location_name: Mapped[str | None] = mapped_column(String(255))
    location_address: Mapped[str | None] = mapped_column(String(255))
    location_city: Mapped[str | None] = mapped_column(String(120), index=True)
    location_state: Mapped[str | None] = mapped_column(String(120))
    location_zip: Mapped[str | None] = mapped_column(String(20))
    location_country: Mapped[str] = mapped_column(String(2), default="US", nullable=False)
    location_lat: Mapped[float | None] = mapped_column(Float)
    location_lng: Mapped[float | None] = mapped_column(Float)

    virtual_link: Mapped[str | None] = mapped_column(String(500))
    virtual_platform: Mapped[str | None] = mapped_column(String(50))

    max_attendees: Mapped[int | None] = mapped_column()
    requires_approval: Mapped[bool] = mapped_column(default=False, nullable=False)
    registration_deadline: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    status: Mapped[str] = mapped_column(String(20), default=MeetupStatus.DRAFT.value, nullable=False, index=True)
    attendee_count: Mapped[int] = mapped_column(default=0, nullable=False)
    cover_image_url: Mapped[str | None] = mapped_column(String(500))
    tags: Mapped[list | None] = mapped_column(JSON)

    @property
    def is_full(self) -> bool:
        return bool(self.max_attendees) and self.attendee_count >= self.max_attendees

    def __repr__(self) -> str:
        return f"<Meetup(id={self.id}, title={self.title})>"


class MeetupRsvp(TimestampMixin, Base):
    __tablename__ = "meetup_rsvps"
    __table_args__ = (UniqueConstraint("meetup_id", "user_id", name="uq_meetup_rsvps_meetup_user"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    meetup_id: Mapped[int] = mapped_column(ForeignKey("meetups.id", ondelete="CASCADE"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    message: Mapped[str | None] = mapped_column(Text)
    checked_in_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
