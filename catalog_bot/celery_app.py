"""
Celery application configuration for the catalog bot workers.
"""
from celery import Celery

from catalog_bot.core.config import get_settings

settings = get_settings()

celery_app = Celery(
    "catalog_bot",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=[
        "catalog_bot.tasks.catalog_tasks",
    ]
)

celery_app.conf.update(
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    timezone="UTC",
    enable_utc=True,

    task_track_started=True,
    task_time_limit=60 * 60,  # full catalog rescans can be slow
    task_soft_time_limit=55 * 60,

    # One bulk run at a time per worker process; writes are already sequential
    worker_prefetch_multiplier=1,
    task_acks_late=False,

    result_expires=7200,

    task_routes={
        'catalog_bot.tasks.catalog_tasks.*': {
            'queue': 'catalog_queue',
        },
    },
)
