"""
Store service - memorial gift catalogue, checkout and order history.
The active catalogue is cached in Redis per product type.
"""

import logging

from solace.cache.redis_client import cache_delete, cache_get_json, cache_set
from solace.config import get_settings
from solace.core.enums import ProductType
from solace.core.errors import InvalidRequestError, NotFoundError
from solace.db.models.profile import Profile
from solace.db.models.store import StoreOrder, StoreOrderItem, StoreProduct
from solace.db.repositories.memorial_repository import MemorialRepository
from solace.db.repositories.store_repository import (
    StoreOrderItemRepository,
    StoreOrderRepository,
    StoreProductRepository,
)
from solace.payments import stripe_client
from solace.schemas.store import CheckoutRequest, ProductCreate, ProductResponse, ProductUpdate

logger = logging.getLogger(__name__)

PRODUCTS_CACHE_PREFIX = "store:products:"


def products_cache_key(product_type: str | None) -> str:
    return f"{PRODUCTS_CACHE_PREFIX}{product_type or 'all'}"


def product_snapshot(product: StoreProduct) -> dict:
    return {
        "name": product.name,
        "description": product.description,
        "product_type": product.product_type,
        "price_cents": product.price_cents,
        "preview_image_url": product.preview_image_url,
        "digital_asset_path": product.digital_asset_path,
    }


class StoreService:
    """Store catalogue, checkout and order history."""

    def __init__(
        self,
        product_repo: StoreProductRepository,
        order_repo: StoreOrderRepository,
        order_item_repo: StoreOrderItemRepository,
        memorial_repo: MemorialRepository,
    ):
        self.product_repo = product_repo
        self.order_repo = order_repo
        self.order_item_repo = order_item_repo
        self.memorial_repo = memorial_repo

    async def list_products(self, product_type: str | None = None) -> list[dict]:
        """Active products, optionally by type. Cached."""
        key = products_cache_key(product_type)
        cached = await cache_get_json(key)
        if cached is not None:
            return cached
        products = await self.product_repo.list_active(product_type)
        payload = [ProductResponse.model_validate(p).model_dump(mode="json") for p in products]
        await cache_set(key, payload, ttl_seconds=get_settings().cache_ttl_seconds)
        return payload

    async def _invalidate_catalogue(self) -> None:
        keys = [products_cache_key(None)] + [products_cache_key(t.value) for t in ProductType]
        await cache_delete(*keys)

    async def list_all_products(self) -> list[StoreProduct]:
        """Every product for the admin listing."""
        return await self.product_repo.list_all()

    async def create_product(self, data: ProductCreate) -> StoreProduct:
        """Add a product and drop the cached catalogue."""
        values = data.model_dump()
        values["product_type"] = data.product_type.value
        values["status"] = data.status.value
        product = await self.product_repo.add(StoreProduct(**values))
        await self._invalidate_catalogue()
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    async def update_product(self, product_id: int, data: ProductUpdate) -> StoreProduct:
        """Apply a partial update. Nulls for required fields leave them unchanged."""
        product = await self.product_repo.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in ("name", "product_type", "price_cents", "status", "display_order"):
                continue
            setattr(product, field, value.value if hasattr(value, "value") else value)
        product = await self.product_repo.save(product)
        await self._invalidate_catalogue()
        return product

    async def create_checkout(self, profile: Profile, data: CheckoutRequest) -> dict[str, str]:
        """Create a pending order for the cart and start its checkout."""
        if not data.items:
            raise InvalidRequestError("Invalid cart items")
        products = await self.product_repo.get_active_by_ids([i.product_id for i in data.items])
        if any(item.product_id not in products for item in data.items):
            raise InvalidRequestError("Invalid products in cart")
        memorial_ids = await self.memorial_repo.get_existing_ids([i.memorial_id for i in data.items])
        if any(item.memorial_id not in memorial_ids for item in data.items):
            raise InvalidRequestError("Memorial not found for one or more cart items")

        settings = get_settings()
        total = sum(products[item.product_id].price_cents for item in data.items)
        order = await self.order_repo.add(
            StoreOrder(
                user_id=profile.id,
                total_amount_cents=total,
                currency=settings.store_currency,
                customer_email=profile.email,
                customer_name=profile.display_name or profile.full_name,
            )
        )
        line_items = []
        for item in data.items:
            product = products[item.product_id]
            await self.order_item_repo.add(
                StoreOrderItem(
                    order_id=order.id,
                    product_id=product.id,
                    memorial_id=item.memorial_id,
                    price_cents=product.price_cents,
                    dedication_message=item.dedication_message,
                    product_snapshot=product_snapshot(product),
                )
            )
            product_data = {"name": product.name}
            if item.memorial_name:
                product_data["description"] = f"For {item.memorial_name}"
            if product.preview_image_url:
                product_data["images"] = [product.preview_image_url]
            line_items.append(
                {
                    "price_data": {
                        "currency": settings.store_currency,
                        "product_data": product_data,
                        "unit_amount": product.price_cents,
                    },
                    "quantity": 1,
                }
            )

        site_url = settings.site_url.rstrip("/")
        session = await stripe_client.create_checkout_session(
            mode="payment",
            customer_email=profile.email,
            line_items=line_items,
            success_url=f"{site_url}/checkout/success?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{site_url}/store/cart",
            metadata={"order_id": str(order.id), "user_id": str(profile.id)},
        )
        order.stripe_checkout_session_id = session["session_id"]
        await self.order_repo.save(order)
        logger.info("Order %s created for profile %s (%s cents)", order.id, profile.id, total)
        return session

    async def list_orders(self, profile: Profile) -> list[dict]:
        """The caller's orders with their items."""
        orders = await self.order_repo.list_for_user(profile.id)
        items = await self.order_item_repo.list_for_orders([o.id for o in orders])
        by_order: dict[int, list[StoreOrderItem]] = {}
        for item in items:
            by_order.setdefault(item.order_id, []).append(item)
        return [
            {
                "id": o.id,
                "total_amount_cents": o.total_amount_cents,
                "currency": o.currency,
                "payment_status": o.payment_status,
                "fulfillment_status": o.fulfillment_status,
                "created_at": o.created_at,
                "paid_at": o.paid_at,
                "items": by_order.get(o.id, []),
            }
            for o in orders
        ]
