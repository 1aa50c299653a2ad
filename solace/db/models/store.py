"""
Store models - digital memorial gifts, orders and order items.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from solace.core.enums import FulfillmentStatus, PaymentStatus, ProductStatus
from solace.db.base import Base, TimestampMixin


class StoreProduct(TimestampMixin, Base):
    __tablename__ = "store_products"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    product_type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    price_cents: Mapped[int] = mapped_column(nullable=False, default=0)
    preview_image_url: Mapped[str | None] = mapped_column(String(500))
    digital_asset_path: Mapped[str | None] = mapped_column(String(500))
    tags: Mapped[list | None] = mapped_column(JSON)
    display_order: Mapped[int] = mapped_column(default=0, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default=ProductStatus.DRAFT.value, nullable=False, index=True)
    purchase_count: Mapped[int] = mapped_column(default=0, nullable=False)


class StoreOrder(TimestampMixin, Base):
    __tablename__ = "store_orders"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("profiles.id"), index=True)
    total_amount_cents: Mapped[int] = mapped_column(nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="usd", nullable=False)
    stripe_checkout_session_id: Mapped[str | None] = mapped_column(String(255), index=True)
    stripe_payment_intent_id: Mapped[str | None] = mapped_column(String(255))
    payment_status: Mapped[str] = mapped_column(String(20), default=PaymentStatus.PENDING.value, nullable=False)
    fulfillment_status: Mapped[str] = mapped_column(
        String(20), default=FulfillmentStatus.PENDING.value, nullable=False
    )
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_name: Mapped[str | None] = mapped_column(String(255))
    paid_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    fulfilled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))


class StoreOrderItem(TimestampMixin, Base):
    __tablename__ = "store_order_items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("store_orders.id", ondelete="CASCADE"), index=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("store_products.id"))
    memorial_id: Mapped[int] = mapped_column(ForeignKey("memorials.id"))
    price_cents: Mapped[int] = mapped_column(nullable=False)
    dedication_message: Mapped[str | None] = mapped_column(Text)
    # Product as it was at purchase time; later product edits do not alter past orders
    product_snapshot: Mapped[dict] = mapped_column(JSON, nullable=False)
