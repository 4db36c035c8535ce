from abc import ABC, abstractmethod

from docingest.processor.exceptions import InvalidStatusTransitionError
from docingest.status.models import ALLOWED_TRANSITIONS, JobState, StatusRecord


def check_transition(document_id: str, current: JobState, target: JobState) -> None:
    """Raise if moving from current to target would leave the state machine."""
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidStatusTransitionError(
            f"Document {document_id} cannot move from {current.value} to {target.value}"
        )


class BaseStatusStore(ABC):
    """Job-tracking store keyed by document id."""

    @abstractmethod
    def create(self, document_id: str) -> StatusRecord:
        """Register a new job in the pending state at progress 0."""

    @abstractmethod
    def mark_processing(self, document_id: str) -> None:
        """Move a pending job to processing."""

    @abstractmethod
    def update_progress(self, document_id: str, progress: int) -> None:
        """Raise the progress of a processing job; lower values are ignored."""

    @abstractmethod
    def mark_completed(self, document_id: str) -> None:
        """Finish a processing job at progress 100."""

    @abstractmethod
    def mark_failed(self, document_id: str, error: str) -> None:
        """Finish a pending or processing job as failed."""

    @abstractmethod
    def find_by_id(self, document_id: str) -> StatusRecord | None:
        """Return the tracked record, or None for unknown ids."""
