"""Payment-provider responses shared by store, subscription and organizer checkouts."""

from pydantic import BaseModel


class CheckoutSessionResponse(BaseModel):
    session_id: str
    url: str | None = None


class PortalResponse(BaseModel):
    url: str


class WebhookAck(BaseModel):
    received: bool = True
    message: str | None = None
