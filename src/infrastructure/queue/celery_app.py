from __future__ import annotations

from celery import Celery

from src.config.settings import Settings


def create_celery_app(settings: Settings) -> Celery:
    app = Celery("cloudinary_gateway", broker=settings.redis_uri, set_as_current=False)
    app.conf.update(
        task_default_queue=settings.deletion_queue_name,
        task_serializer="json",
        accept_content=["json"],
        # Outcomes are reported through signals only; failed jobs are not kept.
        task_ignore_result=True,
        task_store_errors_even_if_ignored=False,
        task_acks_late=False,
        worker_prefetch_multiplier=1,
        worker_hijack_root_logger=False,
        broker_connection_retry_on_startup=True,
        timezone="UTC",
    )
    return app
