"""
Member connection endpoints - send, accept, decline and remove friend requests.
"""

from fastapi import APIRouter, status

from solace.core.dependencies import CurrentProfile, EmailVerifiedProfile
from solace.core.enums import ConnectionTab
from solace.db.repositories.connection_repository import UserConnectionRepository
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.session import DbSession
from solace.schemas.connection import ConnectionRequestCreate, ConnectionResponse, ConnectionStatusResponse
from solace.services.connection_service import ConnectionService

router = APIRouter()


def _get_connection_service(session: DbSession) -> ConnectionService:
    return ConnectionService(UserConnectionRepository(session), ProfileRepository(session))


@router.get("", response_model=list[ConnectionResponse])
async def list_connections(session: DbSession, profile: CurrentProfile, tab: ConnectionTab = ConnectionTab.CONNECTIONS):
    return await _get_connection_service(session).list_for(profile, tab)


@router.post("", response_model=ConnectionResponse, status_code=status.HTTP_201_CREATED)
async def send_request(session: DbSession, profile: EmailVerifiedProfile, data: ConnectionRequestCreate):
    return await _get_connection_service(session).send(profile, data.user_id)


@router.get("/with/{user_id}", response_model=ConnectionStatusResponse)
async def connection_status(session: DbSession, user_id: int, profile: CurrentProfile):
    return await _get_connection_service(session).status_with(profile, user_id)


@router.post("/{connection_id}/accept", response_model=ConnectionResponse)
async def accept_request(session: DbSession, connection_id: int, profile: CurrentProfile):
    return await _get_connection_service(session).accept(connection_id, profile)


@router.post("/{connection_id}/decline", response_model=ConnectionResponse)
async def decline_request(session: DbSession, connection_id: int, profile: CurrentProfile):
    return await _get_connection_service(session).decline(connection_id, profile)


@router.delete("/{connection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_connection(session: DbSession, connection_id: int, profile: CurrentProfile):
    await _get_connection_service(session).remove(connection_id, profile)
