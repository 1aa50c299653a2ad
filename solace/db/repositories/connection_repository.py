"""
Connection repository - requests between two members and the lists shown on the connections page.
"""

from sqlalchemy import and_, or_, select

from solace.core.enums import ConnectionStatus
from solace.db.models.connection import UserConnection
from solace.db.repositories.base_repository import BaseRepository


class UserConnectionRepository(BaseRepository[UserConnection]):
    def __init__(self, session):
        super().__init__(session, UserConnection)

    async def get_between(self, first: int, second: int) -> UserConnection | None:
        """The connection between two members, whichever of them asked."""
        result = await self.session.execute(
            select(UserConnection).where(
                or_(
                    and_(UserConnection.requester_id == first, UserConnection.addressee_id == second),
                    and_(UserConnection.requester_id == second, UserConnection.addressee_id == first),
                )
            )
        )
        return result.scalars().first()

    async def list_accepted(self, user_id: int) -> list[UserConnection]:
        result = await self.session.execute(
            select(UserConnection)
            .where(
                UserConnection.status == ConnectionStatus.ACCEPTED.value,
                or_(UserConnection.requester_id == user_id, UserConnection.addressee_id == user_id),
            )
            .order_by(UserConnection.responded_at.desc(), UserConnection.id.desc())
        )
        return list(result.scalars().all())

    async def list_received(self, user_id: int) -> list[UserConnection]:
        result = await self.session.execute(
            select(UserConnection)
            .where(UserConnection.status == ConnectionStatus.PENDING.value, UserConnection.addressee_id == user_id)
            .order_by(UserConnection.created_at.desc(), UserConnection.id.desc())
        )
        return list(result.scalars().all())

    async def list_sent(self, user_id: int) -> list[UserConnection]:
        result = await self.session.execute(
            select(UserConnection)
            .where(UserConnection.status == ConnectionStatus.PENDING.value, UserConnection.requester_id == user_id)
            .order_by(UserConnection.created_at.desc(), UserConnection.id.desc())
        )
        return list(result.scalars().all())
