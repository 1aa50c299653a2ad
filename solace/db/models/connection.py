"""
Member connections - a request from one member to another, accepted or declined by the addressee.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from solace.core.enums import ConnectionStatus
from solace.db.base import Base, TimestampMixin


class UserConnection(TimestampMixin, Base):
    __tablename__ = "user_connections"
    __table_args__ = (
        UniqueConstraint("requester_id", "addressee_id", name="uq_user_connections_requester_addressee"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    requester_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    addressee_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    status: Mapped[str] = mapped_column(
        String(20), default=ConnectionStatus.PENDING.value, nullable=False, index=True
    )
    responded_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    def other_member(self, user_id: int) -> int:
        return self.addressee_id if self.requester_id == user_id else self.requester_id

    def __repr__(self) -> str:
        return f"<UserConnection(id={self.id}, {self.requester_id}->{self.addressee_id}, status={self.status})>"
