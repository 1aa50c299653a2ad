"""
Community moderation models: content reports and feature suggestions with upvotes.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from solace.core.enums import ReportStatus, SuggestionPriority, SuggestionStatus
from solace.db.base import Base, TimestampMixin


class Report(TimestampMixin, Base):
    __tablename__ = "reports"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    reporter_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    reportable_type: Mapped[str] = mapped_column(String(20), nullable=False)
    reportable_id: Mapped[int] = mapped_column(nullable=False)
    report_type: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    evidence_urls: Mapped[list | None] = mapped_column(JSON)
    status: Mapped[str] = mapped_column(String(32), default=ReportStatus.PENDING.value, nullable=False, index=True)
    reviewed_by: Mapped[int | None] = mapped_column(ForeignKey("profiles.id"))
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    admin_notes: Mapped[str | None] = mapped_column(Text)
    action_taken: Mapped[str | None] = mapped_column(Text)


class FeatureSuggestion(TimestampMixin, Base):
    __tablename__ = "feature_suggestions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    submitted_by: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str | None] = mapped_column(String(32))
    status: Mapped[str] = mapped_column(
        String(20), default=SuggestionStatus.SUBMITTED.value, nullable=False, index=True
    )
    priority: Mapped[str] = mapped_column(String(20), default=SuggestionPriority.MEDIUM.value, nullable=False)
    admin_notes: Mapped[str | None] = mapped_column(Text)
    reviewed_by: Mapped[int | None] = mapped_column(ForeignKey("profiles.id"))
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    upvote_count: Mapped[int] = mapped_column(default=0, nullable=False)


class SuggestionUpvote(TimestampMixin, Base):
    __tablename__ = "suggestion_upvotes"
    __table_args__ = (UniqueConstraint("suggestion_id", "user_id", name="uq_suggestion_upvotes_suggestion_user"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    suggestion_id: Mapped[int] = mapped_column(ForeignKey("feature_suggestions.id", ondelete="CASCADE"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
