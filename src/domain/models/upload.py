from __future__ import annotations

from dataclasses import dataclass

from src.domain.value_objects.job_state import JobState


@dataclass(slots=True, frozen=True)
class SignedUploadDescriptor:
    url: str
    public_id: str
    timestamp: int
    signature: str


@dataclass(slots=True, frozen=True)
class QueueAck:
    """Broker acceptance of a deletion job. Carries no outcome."""

    job_id: str
    job_name: str
    public_id: str
    state: JobState = JobState.QUEUED
