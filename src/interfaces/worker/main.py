from __future__ import annotations

import logging

from src.config.logging import configure_logging
from src.config.settings import Settings, get_settings
from src.infrastructure.cloudinary.assets import CloudinaryAssetRemover
from src.infrastructure.queue.context import QueueContext
from src.infrastructure.queue.rate_limit import FixedWindowRateLimiter
from src.infrastructure.queue.worker import (
    DeletionWorker,
    connect_worker_signals,
    register_deletion_task,
)

logger = logging.getLogger(__name__)


def build_deletion_worker(settings: Settings) -> DeletionWorker:
    return DeletionWorker(
        remover=CloudinaryAssetRemover(
            cloud_name=settings.cloudinary_bucket,
            api_key=settings.cloudinary_key,
            api_secret=settings.cloudinary_secret.get_secret_value(),
        ),
        limiter=FixedWindowRateLimiter(
            settings.deletion_rate_limit_max,
            settings.deletion_rate_limit_window_seconds,
        ),
    )


def worker_argv(settings: Settings) -> list[str]:
    # One execution slot so the in-process limiter bounds the whole consumer
    return [
        "worker",
        "--pool=solo",
        "--concurrency=1",
        f"--queues={settings.deletion_queue_name}",
        f"--loglevel={settings.log_level.upper()}",
        "--without-gossip",
        "--without-mingle",
    ]


def run(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    context = QueueContext.from_settings(settings)
    register_deletion_task(context.celery, build_deletion_worker(settings))
    connect_worker_signals()
    logger.info(
        "Starting deletion worker on %s (limit %d per %.1fs)",
        settings.deletion_queue_name,
        settings.deletion_rate_limit_max,
        settings.deletion_rate_limit_window_seconds,
    )
    try:
        # Celery performs a warm shutdown on SIGTERM/SIGINT: the running job finishes first
        context.celery.worker_main(argv=worker_argv(settings))
    finally:
        context.close()


if __name__ == "__main__":
    run()
