"""Admin-triggered notification e-mails."""

from solace.core.errors import InvalidRequestError
from solace.notifications.templates import is_known_template
from solace.queue.publish import queue_email


def send_templated_email(to: str, template_id: str, data: dict) -> dict:
    if not is_known_template(template_id):
        raise InvalidRequestError(f"Unknown template: {template_id}")
    if not queue_email(to, template_id, data):
        return {"success": False, "message": "Email could not be queued"}
    return {"success": True, "message": "Email queued"}
