"""
Connection service - friend requests between members.

A pair of members shares at most one row. The addressee accepts or declines; either side can
remove the row, which also cancels a request that is still pending.
"""

import logging

from solace.core.clock import utcnow
from solace.core.enums import ConnectionStatus, ConnectionTab
from solace.core.errors import ConflictError, InvalidRequestError, NotFoundError
from solace.db.models.connection import UserConnection
from solace.db.models.profile import Profile
from solace.db.repositories.connection_repository import UserConnectionRepository
from solace.db.repositories.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


def member_view(profile: Profile) -> dict:
    return {
        "id": profile.id,
        "display_name": profile.public_name,
        "profile_image_url": profile.profile_image_url,
        "verification_status": profile.verification_status,
    }


class ConnectionService:
    """Connection requests between members and the lists built from them."""

    def __init__(self, connection_repo: UserConnectionRepository, profile_repo: ProfileRepository):
        self.connection_repo = connection_repo
        self.profile_repo = profile_repo

    def _view(self, connection: UserConnection, profile: Profile, other: Profile | None) -> dict:
        return {
            "id": connection.id,
            "status": connection.status,
            "direction": "sent" if connection.requester_id == profile.id else "received",
            "requester_id": connection.requester_id,
            "addressee_id": connection.addressee_id,
            "member": member_view(other) if other else None,
            "created_at": connection.created_at,
            "responded_at": connection.responded_at,
        }

    async def _views(self, profile: Profile, connections: list[UserConnection]) -> list[dict]:
        others = await self.profile_repo.get_by_ids([c.other_member(profile.id) for c in connections])
        return [self._view(c, profile, others.get(c.other_member(profile.id))) for c in connections]

    async def list_for(self, profile: Profile, tab: ConnectionTab) -> list[dict]:
        """Accepted connections, requests waiting on the caller, or requests the caller sent."""
        if tab == ConnectionTab.RECEIVED:
            connections = await self.connection_repo.list_received(profile.id)
        elif tab == ConnectionTab.SENT:
            connections = await self.connection_repo.list_sent(profile.id)
        else:
            connections = await self.connection_repo.list_accepted(profile.id)
        return await self._views(profile, connections)

    async def status_with(self, profile: Profile, user_id: int) -> dict:
        """
        Relationship as the caller sees it: none, sent, pending (waiting on the caller) or accepted.
        A declined request still reads as sent for the member who asked.
        """
        connection = await self.connection_repo.get_between(profile.id, user_id)
        if connection is None:
            return {"user_id": user_id, "status": "none", "connection_id": None}
        asked = connection.requester_id == profile.id
        if connection.status == ConnectionStatus.ACCEPTED.value:
            status = "accepted"
        elif connection.status == ConnectionStatus.PENDING.value:
            status = "sent" if asked else "pending"
        else:
            status = "sent" if asked else "none"
        return {"user_id": user_id, "status": status, "connection_id": connection.id}

    async def send(self, profile: Profile, user_id: int) -> dict:
        """
        Ask another member to connect. If they already asked the caller, their request is accepted
        instead. A member who declined a request may later send one of their own.
        """
        if user_id == profile.id:
            raise InvalidRequestError("You cannot connect with yourself")
        other = await self.profile_repo.get_by_id(user_id)
        if other is None or other.is_banned:
            raise NotFoundError("User not found")

        connection = await self.connection_repo.get_between(profile.id, other.id)
        if connection is not None:
            asked = connection.requester_id == profile.id
            if connection.status == ConnectionStatus.ACCEPTED.value:
                raise ConflictError("You are already connected")
            if asked:
                raise ConflictError("Connection request already sent")
            if connection.status == ConnectionStatus.PENDING.value:
                return await self._respond(connection, profile, ConnectionStatus.ACCEPTED)
            connection.requester_id, connection.addressee_id = profile.id, other.id
            connection.status = ConnectionStatus.PENDING.value
            connection.responded_at = None
            connection = await self.connection_repo.save(connection)
        else:
            connection = await self.connection_repo.add(
                UserConnection(requester_id=profile.id, addressee_id=other.id)
            )
        logger.info("Profile %s asked to connect with %s (connection %s)", profile.id, other.id, connection.id)
        return self._view(connection, profile, other)

    async def _get_addressed(self, connection_id: int, profile: Profile) -> UserConnection:
        connection = await self.connection_repo.get_by_id(connection_id)
        if connection is None or connection.addressee_id != profile.id:
            raise NotFoundError("Connection request not found")
        if connection.status != ConnectionStatus.PENDING.value:
            raise ConflictError(f"Connection request is already {connection.status}")
        return connection

    async def _respond(self, connection: UserConnection, profile: Profile, status: ConnectionStatus) -> dict:
        connection.status = status.value
        connection.responded_at = utcnow()
        connection = await self.connection_repo.save(connection)
        logger.info("Profile %s %s connection %s", profile.id, status.value, connection.id)
        other = await self.profile_repo.get_by_id(connection.other_member(profile.id))
        return self._view(connection, profile, other)

    async def accept(self, connection_id: int, profile: Profile) -> dict:
        """Accept a pending request addressed to the caller."""
        connection = await self._get_addressed(connection_id, profile)
        return await self._respond(connection, profile, ConnectionStatus.ACCEPTED)

    async def decline(self, connection_id: int, profile: Profile) -> dict:
        """Decline a pending request addressed to the caller."""
        connection = await self._get_addressed(connection_id, profile)
        return await self._respond(connection, profile, ConnectionStatus.DECLINED)

    async def remove(self, connection_id: int, profile: Profile) -> None:
        """Cancel a sent request or end a connection. Either member may do this."""
        connection = await self.connection_repo.get_by_id(connection_id)
        if connection is None or profile.id not in (connection.requester_id, connection.addressee_id):
            raise NotFoundError("Connection not found")
        await self.connection_repo.delete(connection)
        logger.info("Profile %s removed connection %s", profile.id, connection_id)
