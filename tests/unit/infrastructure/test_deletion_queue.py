from __future__ import annotations

from types import SimpleNamespace

import pytest
from kombu.exceptions import OperationalError

from src.application.errors import UpstreamError
from src.config.settings import Settings
from src.domain.value_objects.job_state import JobState
from src.infrastructure.queue.context import QueueContext
from src.infrastructure.queue.producer import CeleryDeletionQueue

PUBLIC_ID = "my-photo-0f8fad5b-d9cb-469f-a165-70867728950e"


class StubCelery:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[dict] = []
        self.closed = False

    def send_task(self, name, args=None, **options):
        if self.fail:
            raise OperationalError("redis unavailable")
        self.sent.append({"name": name, "args": args, **options})
        return SimpleNamespace(id=f"id-{len(self.sent)}")

    def close(self) -> None:
        self.closed = True


async def test_submit_sends_delayed_destroy_job():
    celery = StubCelery()
    queue = CeleryDeletionQueue(celery, queue_name="cloudinary-remove-queue", delay_seconds=3)

    ack = await queue.submit(PUBLIC_ID)

    assert celery.sent == [
        {
            "name": "destroy",
            "args": [{"publicId": PUBLIC_ID}],
            "queue": "cloudinary-remove-queue",
            "countdown": 3,
        }
    ]
    assert ack.job_id == "id-1"
    assert ack.job_name == "destroy"
    assert ack.public_id == PUBLIC_ID
    assert ack.state is JobState.QUEUED


async def test_repeated_requests_are_not_deduplicated():
    celery = StubCelery()
    queue = CeleryDeletionQueue(celery, queue_name="q", delay_seconds=3)

    first = await queue.submit(PUBLIC_ID)
    second = await queue.submit(PUBLIC_ID)

    assert len(celery.sent) == 2
    assert first.job_id != second.job_id


async def test_broker_failure_is_reported_as_upstream_error():
    queue = CeleryDeletionQueue(StubCelery(fail=True), queue_name="q", delay_seconds=3)
    with pytest.raises(UpstreamError):
        await queue.submit(PUBLIC_ID)


def test_context_builds_queue_from_settings_and_closes(test_settings: Settings):
    context = QueueContext.from_settings(test_settings)
    assert context.queue_name == "cloudinary-remove-queue"
    assert context.delay_seconds == 3.0
    assert context.celery.conf.task_default_queue == "cloudinary-remove-queue"
    assert context.celery.conf.task_ignore_result is True

    queue = context.deletion_queue()
    assert queue.celery is context.celery
    assert queue.delay_seconds == 3.0

    stub = StubCelery()
    QueueContext(celery=stub, queue_name="q", delay_seconds=3).close()
    assert stub.closed is True
