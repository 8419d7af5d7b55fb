from __future__ import annotations

import logging

from src.application.errors import ValidationError
from src.application.interfaces.media import DeletionQueue
from src.domain.models.upload import QueueAck
from src.domain.value_objects.public_id import ensure_public_id

logger = logging.getLogger(__name__)


async def execute(public_id: str, queue: DeletionQueue) -> QueueAck:
    try:
        ensure_public_id(public_id)
    except ValueError as exc:
        raise ValidationError(str(exc), details={"publicId": public_id}) from exc
    ack = await queue.submit(public_id)
    logger.info("Deletion queued: job=%s-%s publicId=%s", ack.job_name, ack.job_id, ack.public_id)
    return ack
