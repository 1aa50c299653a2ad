"""Store and checkout schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from solace.core.enums import ProductStatus, ProductType


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    product_type: ProductType
    price_cents: int = Field(..., ge=0)
    preview_image_url: str | None = None
    digital_asset_path: str | None = None
    tags: list[str] = []
    display_order: int = 0
    status: ProductStatus = ProductStatus.DRAFT


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    product_type: ProductType | None = None
    price_cents: int | None = Field(None, ge=0)
    preview_image_url: str | None = None
    digital_asset_path: str | None = None
    tags: list[str] | None = None
    display_order: int | None = None
    status: ProductStatus | None = None


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str
    product_type: str
    price_cents: int
    preview_image_url: str | None
    tags: list[str] | None
    display_order: int
    status: str
    purchase_count: int

    model_config = {"from_attributes": True}


class CartItem(BaseModel):
    product_id: int
    memorial_id: int
    memorial_name: str | None = None
    dedication_message: str | None = Field(None, max_length=500)


class CheckoutRequest(BaseModel):
    items: list[CartItem] = []


class OrderItemResponse(BaseModel):
    id: int
    product_id: int
    memorial_id: int
    price_cents: int
    dedication_message: str | None
    product_snapshot: dict[str, Any]

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    id: int
    total_amount_cents: int
    currency: str
    payment_status: str
    fulfillment_status: str
    created_at: datetime
    paid_at: datetime | None
    items: list[OrderItemResponse] = []
