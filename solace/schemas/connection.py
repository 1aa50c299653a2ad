"""Member connection schemas."""

from datetime import datetime

from pydantic import BaseModel


class ConnectionRequestCreate(BaseModel):
    user_id: int


class ConnectionMember(BaseModel):
    id: int
    display_name: str
    profile_image_url: str | None = None
    verification_status: str


class ConnectionResponse(BaseModel):
    id: int
    status: str
    direction: str
    requester_id: int
    addressee_id: int
    member: ConnectionMember | None
    created_at: datetime
    responded_at: datetime | None


class ConnectionStatusResponse(BaseModel):
    user_id: int
    status: str
    connection_id: int | None = None
