"""
Notification e-mail endpoint (admin). Delivery happens in the Celery worker.
"""

from fastapi import APIRouter

from solace.core.dependencies import AdminProfile
from solace.schemas.admin import EmailSendRequest, EmailSendResponse
from solace.services.email_service import send_templated_email

router = APIRouter()


@router.post("/send", response_model=EmailSendResponse)
async def send_email(admin: AdminProfile, data: EmailSendRequest):
    return send_templated_email(str(data.to), data.template_id, data.data)
