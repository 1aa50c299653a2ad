"""
Celery application - background work that must not block a request:
search indexing and outbound e-mail.

E-mail and search run on separate queues so a slow SMTP relay never delays indexing:
  celery -A solace.queue.celery_app worker -Q email,search
"""

from celery import Celery
from kombu import Queue

from solace.config import get_settings

settings = get_settings()

EMAIL_QUEUE = "email"
SEARCH_QUEUE = "search"

celery_app = Celery(
    "solace",
    broker=settings.celery_broker_url,
    backend=settings.redis_url,
    include=["solace.queue.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    task_queues=(Queue(EMAIL_QUEUE), Queue(SEARCH_QUEUE)),
    task_default_queue=SEARCH_QUEUE,
    task_routes={
        "solace.queue.tasks.send_email_task": {"queue": EMAIL_QUEUE},
        "solace.queue.tasks.index_document_task": {"queue": SEARCH_QUEUE},
        "solace.queue.tasks.remove_document_task": {"queue": SEARCH_QUEUE},
    },
    # Results are never read; e-mail payloads should not linger in Redis
    task_ignore_result=True,
    task_time_limit=300,
    task_soft_time_limit=60,
    task_acks_late=True,
    worker_prefetch_multiplier=1,
)
