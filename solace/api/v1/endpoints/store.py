"""
Store endpoints - gift catalogue, checkout and order history.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from solace.core.dependencies import AdminProfile, CurrentProfile, require_verification
from solace.core.enums import ProductType, VerificationStatus
from solace.db.models.profile import Profile
from solace.db.repositories.memorial_repository import MemorialRepository
from solace.db.repositories.store_repository import (
    StoreOrderItemRepository,
    StoreOrderRepository,
    StoreProductRepository,
)
from solace.db.session import DbSession
from solace.schemas.billing import CheckoutSessionResponse
from solace.schemas.store import CheckoutRequest, OrderResponse, ProductCreate, ProductResponse, ProductUpdate
from solace.services.store_service import StoreService

router = APIRouter()
checkout_router = APIRouter()
admin_router = APIRouter()

PurchaserProfile = Annotated[
    Profile,
    Depends(
        require_verification(
            VerificationStatus.EMAIL_VERIFIED, message="Email verification required to make purchases"
        )
    ),
]


def _get_store_service(session: DbSession) -> StoreService:
    return StoreService(
        StoreProductRepository(session),
        StoreOrderRepository(session),
        StoreOrderItemRepository(session),
        MemorialRepository(session),
    )


@router.get("/products", response_model=list[ProductResponse])
async def list_products(session: DbSession, type: ProductType | None = None):
    """Active products, cached per type."""
    return await _get_store_service(session).list_products(type.value if type else None)


@router.get("/orders", response_model=list[OrderResponse])
async def my_orders(session: DbSession, profile: CurrentProfile):
    return await _get_store_service(session).list_orders(profile)


@checkout_router.post("/create-session", response_model=CheckoutSessionResponse)
async def create_checkout_session(session: DbSession, profile: PurchaserProfile, data: CheckoutRequest):
    """Create a pending order and a hosted payment page for it."""
    return await _get_store_service(session).create_checkout(profile, data)


# --- Admin ---


@admin_router.get("", response_model=list[ProductResponse])
async def admin_list_products(session: DbSession, admin: AdminProfile):
    return await _get_store_service(session).list_all_products()


@admin_router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(session: DbSession, admin: AdminProfile, data: ProductCreate):
    return await _get_store_service(session).create_product(data)


@admin_router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(session: DbSession, product_id: int, admin: AdminProfile, data: ProductUpdate):
    return await _get_store_service(session).update_product(product_id, data)
