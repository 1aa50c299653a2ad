"""
SQLAlchemy declarative base and shared column mixins.
Single place for table definitions and migrations.
"""

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from solace.core.clock import utcnow


class Base(DeclarativeBase):
    """Base class for all ORM models. Enables Alembic migrations."""

    pass


class TimestampMixin:
    """created_at / updated_at set client-side so they are readable right after flush."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now()
    )
