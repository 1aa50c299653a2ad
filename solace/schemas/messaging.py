"""Direct messaging schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)


class MessageResponse(BaseModel):
    id: int
    conversation_id: int
    sender_id: int
    content: str
    read_at: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ConversationPartner(BaseModel):
    id: int
    display_name: str
    profile_image_url: str | None = None
    verification_status: str


class ConversationSummary(BaseModel):
    id: int
    other_user: ConversationPartner | None
    last_message_at: datetime
    last_message_preview: str | None
    unread_count: int
    is_muted: bool = False


class ConversationThread(BaseModel):
    conversation_id: int
    other_user: ConversationPartner
    messages: list[MessageResponse]


class ConversationSettingsUpdate(BaseModel):
    is_muted: bool | None = None
    is_archived: bool | None = None


class ConversationSettings(BaseModel):
    conversation_id: int
    is_muted: bool
    is_archived: bool
