from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from src.domain.value_objects.job_state import JobState

DELETION_JOB_NAME = "destroy"


@dataclass(slots=True)
class DeletionJob:
    """
    A request to remove one asset from the provider.
    Owned by the queue until a worker claims it; never re-enters the queue.
    """

    public_id: str
    job_id: str | None = None
    name: str = DELETION_JOB_NAME
    attempts: int = 0
    state: JobState = JobState.QUEUED
    error: str | None = None

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        *,
        job_id: str | None = None,
        attempts: int = 1,
    ) -> DeletionJob:
        """Rebuild a job handed out by the queue; it is ready to be claimed."""
        public_id = payload.get("publicId")
        if not isinstance(public_id, str) or not public_id:
            raise ValueError("Deletion job payload requires a publicId string")
        job = cls(public_id=public_id, job_id=job_id, attempts=attempts)
        # The broker only hands out a job once its grace period has elapsed
        job.mark_ready()
        return job

    def to_payload(self) -> dict[str, str]:
        return {"publicId": self.public_id}

    @property
    def label(self) -> str:
        return f"{self.name}-{self.job_id}"

    def mark_ready(self) -> None:
        self._move_to(JobState.READY)

    def claim(self) -> None:
        self._move_to(JobState.CLAIMED)

    def complete(self) -> None:
        self._move_to(JobState.COMPLETED)

    def fail(self, reason: str) -> None:
        self._move_to(JobState.FAILED)
        self.error = reason

    def _move_to(self, target: JobState) -> None:
        if not self.state.can_transition_to(target):
            raise ValueError(f"Cannot move deletion job from {self.state.value} to {target.value}")
        self.state = target
