"""
Grief resources (articles, hotlines, organizations, ...) and public submissions awaiting review.
"""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from solace.db.base import Base, TimestampMixin


class Resource(TimestampMixin, Base):
    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str | None] = mapped_column(Text)
    resource_type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    categories: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    tags: Mapped[list | None] = mapped_column(JSON)
    external_url: Mapped[str | None] = mapped_column(String(500))
    phone_number: Mapped[str | None] = mapped_column(String(50))
    is_24_7: Mapped[bool] = mapped_column(default=False, nullable=False)
    author: Mapped[str | None] = mapped_column(String(255))
    source: Mapped[str | None] = mapped_column(String(255))
    is_featured: Mapped[bool] = mapped_column(default=False, nullable=False)
    is_published: Mapped[bool] = mapped_column(default=True, nullable=False)
    display_order: Mapped[int] = mapped_column(default=0, nullable=False)
    view_count: Mapped[int] = mapped_column(default=0, nullable=False)
    helpful_count: Mapped[int] = mapped_column(default=0, nullable=False)


class ResourceSubmission(TimestampMixin, Base):
    __tablename__ = "resource_submissions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    resource_type: Mapped[str] = mapped_column(String(32), nullable=False)
    categories: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    external_url: Mapped[str | None] = mapped_column(String(500))
    phone_number: Mapped[str | None] = mapped_column(String(50))
    author: Mapped[str | None] = mapped_column(String(255))
    source: Mapped[str | None] = mapped_column(String(255))
    submitter_name: Mapped[str] = mapped_column(String(255), nullable=False)
    submitter_email: Mapped[str] = mapped_column(String(255), nullable=False)
    submitter_notes: Mapped[str | None] = mapped_column(Text)
