from __future__ import annotations

import logging
from dataclasses import dataclass

from celery import Celery

from src.config.settings import Settings
from src.infrastructure.queue.celery_app import create_celery_app
from src.infrastructure.queue.producer import CeleryDeletionQueue

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class QueueContext:
    """Owns the Celery app and its broker connection for one process."""

    celery: Celery
    queue_name: str
    delay_seconds: float

    @classmethod
    def from_settings(cls, settings: Settings) -> QueueContext:
        return cls(
            celery=create_celery_app(settings),
            queue_name=settings.deletion_queue_name,
            delay_seconds=settings.deletion_delay_seconds,
        )

    def deletion_queue(self) -> CeleryDeletionQueue:
        return CeleryDeletionQueue(
            self.celery, queue_name=self.queue_name, delay_seconds=self.delay_seconds
        )

    def close(self) -> None:
        logger.info("Closing broker connection for queue %s", self.queue_name)
        self.celery.close()
