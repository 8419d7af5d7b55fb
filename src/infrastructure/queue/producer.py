from __future__ import annotations

import asyncio
import logging

from celery import Celery
from kombu.exceptions import OperationalError

from src.application.errors import UpstreamError
from src.domain.models.deletion_job import DELETION_JOB_NAME, DeletionJob
from src.domain.models.upload import QueueAck

logger = logging.getLogger(__name__)


class CeleryDeletionQueue:
    def __init__(self, celery: Celery, *, queue_name: str, delay_seconds: float) -> None:
        self.celery = celery
        self.queue_name = queue_name
        self.delay_seconds = delay_seconds

    def submit_blocking(self, public_id: str) -> QueueAck:
        job = DeletionJob(public_id=public_id)
        try:
            result = self.celery.send_task(
                DELETION_JOB_NAME,
                args=[job.to_payload()],
                queue=self.queue_name,
                countdown=self.delay_seconds,
            )
        except OperationalError as exc:
            logger.error("Broker rejected deletion job for %s: %s", public_id, exc)
            raise UpstreamError("Failed to enqueue deletion job") from exc
        return QueueAck(job_id=str(result.id), job_name=job.name, public_id=public_id)

    async def submit(self, public_id: str) -> QueueAck:
        return await asyncio.to_thread(self.submit_blocking, public_id)
