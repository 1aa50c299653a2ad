"""
Memorial models - remembrance pages, tributes and candles left by visitors, and gifts purchased in the store.
"""

from datetime import date, datetime

from sqlalchemy import JSON, Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from solace.db.base import Base, TimestampMixin


class Memorial(TimestampMixin, Base):
    __tablename__ = "memorials"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_by: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    slug: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)

    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(120))
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    nickname: Mapped[str | None] = mapped_column(String(120))
    date_of_birth: Mapped[date | None] = mapped_column(Date)
    date_of_passing: Mapped[date] = mapped_column(Date, nullable=False)
    loss_type: Mapped[str | None] = mapped_column(String(50))

    obituary: Mapped[str | None] = mapped_column(Text)
    life_story: Mapped[str | None] = mapped_column(Text)
    favorite_memory: Mapped[str | None] = mapped_column(Text)
    favorite_quote: Mapped[str | None] = mapped_column(Text)
    relationship_to_creator: Mapped[str | None] = mapped_column(String(120))
    occupation: Mapped[str | None] = mapped_column(String(120))
    hobbies: Mapped[list | None] = mapped_column(JSON)
    service_links: Mapped[list | None] = mapped_column(JSON)

    is_public: Mapped[bool] = mapped_column(default=True, nullable=False)
    allow_tributes: Mapped[bool] = mapped_column(default=True, nullable=False)
    allow_photos: Mapped[bool] = mapped_column(default=True, nullable=False)
    theme_id: Mapped[str | None] = mapped_column(String(50))
    video_url: Mapped[str | None] = mapped_column(String(500))
    profile_photo_url: Mapped[str | None] = mapped_column(String(500))
    cover_photo_url: Mapped[str | None] = mapped_column(String(500))

    @property
    def name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    def __repr__(self) -> str:
        return f"<Memorial(id={self.id}, slug={self.slug})>"


class MemorialTribute(TimestampMixin, Base):
    __tablename__ = "memorial_tributes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    memorial_id: Mapped[int] = mapped_column(ForeignKey("memorials.id", ondelete="CASCADE"), index=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_hidden: Mapped[bool] = mapped_column(default=False, nullable=False)


class MemorialCandle(TimestampMixin, Base):
    """A virtual candle lit on a memorial. Shown until expires_at."""

    __tablename__ = "memorial_candles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    memorial_id: Mapped[int] = mapped_column(ForeignKey("memorials.id", ondelete="CASCADE"), index=True)
    lit_by: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    message: Mapped[str | None] = mapped_column(String(500))
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)


class MemorialStoreItem(TimestampMixin, Base):
    """A purchased gift displayed on a memorial page. One per paid order item."""

    __tablename__ = "memorial_store_items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    memorial_id: Mapped[int] = mapped_column(ForeignKey("memorials.id", ondelete="CASCADE"), index=True)
    order_item_id: Mapped[int] = mapped_column(ForeignKey("store_order_items.id"), unique=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("store_products.id"))
    purchased_by: Mapped[int] = mapped_column(ForeignKey("profiles.id"))
    purchaser_name: Mapped[str] = mapped_column(String(255), nullable=False)
    dedication_message: Mapped[str | None] = mapped_column(Text)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    product_type: Mapped[str] = mapped_column(String(32), nullable=False)
    preview_image_url: Mapped[str | None] = mapped_column(String(500))
    digital_asset_path: Mapped[str | None] = mapped_column(String(500))
    is_visible: Mapped[bool] = mapped_column(default=True, nullable=False)
    display_order: Mapped[int] = mapped_column(default=0, nullable=False)
