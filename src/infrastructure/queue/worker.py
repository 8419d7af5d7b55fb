from __future__ import annotations

import logging
from typing import Any

from celery import Celery, Task
from celery.signals import task_failure, task_success, worker_ready

from src.application.errors import UpstreamError
from src.application.interfaces.media import AssetRemover
from src.domain.models.deletion_job import DELETION_JOB_NAME, DeletionJob
from src.infrastructure.queue.rate_limit import FixedWindowRateLimiter

logger = logging.getLogger(__name__)


class DeletionWorker:
    def __init__(self, *, remover: AssetRemover, limiter: FixedWindowRateLimiter) -> None:
        self.remover = remover
        self.limiter = limiter

    def process(self, job: DeletionJob) -> DeletionJob:
        self.limiter.acquire()
        job.claim()
        logger.debug("[%s]: claimed %s (attempt %d)", job.label, job.public_id, job.attempts)
        try:
            self.remover.destroy(job.public_id)
        except Exception as exc:
            job.fail(str(exc))
            if isinstance(exc, UpstreamError):
                raise
            raise UpstreamError(
                f"Deletion failed for {job.public_id}", details={"publicId": job.public_id}
            ) from exc
        job.complete()
        return job


def register_deletion_task(celery: Celery, worker: DeletionWorker) -> Task:
    """Bind ``worker`` to the ``destroy`` job name. No retries are configured."""

    @celery.task(name=DELETION_JOB_NAME, bind=True, ignore_result=True, max_retries=0)
    def destroy(task: Task, payload: dict[str, Any]) -> str:
        job = DeletionJob.from_payload(
            payload,
            job_id=task.request.id,
            attempts=(task.request.retries or 0) + 1,
        )
        worker.process(job)
        return job.public_id

    return destroy


def _on_worker_ready(sender=None, **kwargs: Any) -> None:  # noqa: ANN001
    logger.info("Worker active")


def _on_task_success(sender=None, result=None, **kwargs: Any) -> None:  # noqa: ANN001
    if sender is None or sender.name != DELETION_JOB_NAME:
        return
    logger.info("[%s-%s]: OK %s", sender.name, sender.request.id, result)


def _on_task_failure(
    sender=None,  # noqa: ANN001
    task_id: str | None = None,
    exception: BaseException | None = None,
    args: Any = None,
    **kwargs: Any,
) -> None:
    if sender is None or sender.name != DELETION_JOB_NAME:
        return
    public_id = None
    if args:
        payload = args[0]
        if isinstance(payload, dict):
            public_id = payload.get("publicId")
    logger.error(
        "[%s-%s]: FAILED %s (discarded): %s", sender.name, task_id, public_id, exception
    )


def connect_worker_signals() -> None:
    worker_ready.connect(_on_worker_ready, weak=False)
    task_success.connect(_on_task_success, weak=False)
    task_failure.connect(_on_task_failure, weak=False)
