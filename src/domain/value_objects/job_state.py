from __future__ import annotations

from enum import Enum


class JobState(str, Enum):
    QUEUED = "queued"
    READY = "ready"
    CLAIMED = "claimed"
    COMPLETED = "completed"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        return self in {JobState.COMPLETED, JobState.FAILED}

    def can_transition_to(self, target: JobState) -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[JobState, frozenset[JobState]] = {
    JobState.QUEUED: frozenset({JobState.READY}),
    JobState.READY: frozenset({JobState.CLAIMED}),
    JobState.CLAIMED: frozenset({JobState.COMPLETED, JobState.FAILED}),
    JobState.COMPLETED: frozenset(),
    JobState.FAILED: frozenset(),
}
