"""
Celery tasks. The API publishes, workers consume; every task retries up to 3 times.
"""

import smtplib
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid

from celery.utils.log import get_task_logger

from solace.config import get_settings
from solace.notifications.templates import render_email
from solace.queue.celery_app import celery_app
from solace.search.elasticsearch_client import delete_document_sync, index_document_sync

logger = get_task_logger(__name__)


@celery_app.task(bind=True, max_retries=3)
def index_document_task(self, kind: str, doc: dict):
    """Index (or re-index) one search document after a create/update."""
    try:
        index_document_sync(kind, doc)
    except Exception as exc:
        logger.warning("Indexing %s/%s failed: %s", kind, doc.get("id"), exc)
        raise self.retry(exc=exc, countdown=5)


@celery_app.task(bind=True, max_retries=3)
def remove_document_task(self, kind: str, doc_id: int):
    try:
        delete_document_sync(kind, doc_id)
    except Exception as exc:
        raise self.retry(exc=exc, countdown=5)


def _deliver(to: str, subject: str, body: str) -> None:
    settings = get_settings()
    msg = MIMEText(body, "plain", "utf-8")
    msg["Subject"] = subject
    msg["From"] = settings.mail_from
    msg["To"] = to
    msg["Date"] = formatdate(localtime=False)
    msg["Message-ID"] = make_msgid(domain="solace.community")

    with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=30) as smtp:
        if settings.smtp_use_tls:
            smtp.starttls()
        if settings.smtp_username:
            smtp.login(settings.smtp_username, settings.smtp_password)
        smtp.send_message(msg)


@celery_app.task(bind=True, max_retries=3)
def send_email_task(self, to: str, template_id: str, data: dict):
    """Render a template and send it over SMTP."""
    subject, body = render_email(template_id, data, get_settings().site_url)
    try:
        _deliver(to, subject, body)
    except (smtplib.SMTPException, OSError) as exc:
        logger.warning("Sending %s to %s failed (attempt %s): %s", template_id, to, self.request.retries + 1, exc)
        raise self.retry(exc=exc, countdown=30 * (self.request.retries + 1))
    logger.info("Sent %s e-mail to %s", template_id, to)
    return {"template_id": template_id, "to": to}
