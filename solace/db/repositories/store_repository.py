"""
Store repository - products, orders and order items.
"""

from sqlalchemy import select

from solace.core.enums import ProductStatus
from solace.db.models.store import StoreOrder, StoreOrderItem, StoreProduct
from solace.db.repositories.base_repository import BaseRepository


class StoreProductRepository(BaseRepository[StoreProduct]):
    def __init__(self, session):
        super().__init__(session, StoreProduct)

    async def list_active(self, product_type: str | None = None) -> list[StoreProduct]:
        stmt = select(StoreProduct).where(StoreProduct.status == ProductStatus.ACTIVE.value)
        if product_type:
            stmt = stmt.where(StoreProduct.product_type == product_type)
        result = await self.session.execute(stmt.order_by(StoreProduct.display_order, StoreProduct.name))
        return list(result.scalars().all())

    async def list_all(self) -> list[StoreProduct]:
        result = await self.session.execute(select(StoreProduct).order_by(StoreProduct.display_order, StoreProduct.id))
        return list(result.scalars().all())

    async def get_active_by_ids(self, ids: list[int]) -> dict[int, StoreProduct]:
        if not ids:
            return {}
        result = await self.session.execute(
            select(StoreProduct).where(
                StoreProduct.id.in_(set(ids)), StoreProduct.status == ProductStatus.ACTIVE.value
            )
        )
        return {p.id: p for p in result.scalars().all()}

    async def get_by_ids(self, ids: list[int]) -> dict[int, StoreProduct]:
        if not ids:
            return {}
        result = await self.session.execute(select(StoreProduct).where(StoreProduct.id.in_(set(ids))))
        return {p.id: p for p in result.scalars().all()}


class StoreOrderRepository(BaseRepository[StoreOrder]):
    def __init__(self, session):
        super().__init__(session, StoreOrder)

    async def list_for_user(self, user_id: int) -> list[StoreOrder]:
        result = await self.session.execute(
            select(StoreOrder).where(StoreOrder.user_id == user_id).order_by(StoreOrder.created_at.desc())
        )
        return list(result.scalars().all())


class StoreOrderItemRepository(BaseRepository[StoreOrderItem]):
    def __init__(self, session):
        super().__init__(session, StoreOrderItem)

    async def list_for_order(self, order_id: int) -> list[StoreOrderItem]:
        result = await self.session.execute(
            select(StoreOrderItem).where(StoreOrderItem.order_id == order_id).order_by(StoreOrderItem.id)
        )
        return list(result.scalars().all())

    async def list_for_orders(self, order_ids: list[int]) -> list[StoreOrderItem]:
        if not order_ids:
            return []
        result = await self.session.execute(
            select(StoreOrderItem).where(StoreOrderItem.order_id.in_(order_ids)).order_by(StoreOrderItem.id)
        )
        return list(result.scalars().all())
