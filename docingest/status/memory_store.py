import threading
from dataclasses import replace
from datetime import datetime, timezone

from docingest.processor.exceptions import (
    DocumentNotFoundError,
    InvalidStatusTransitionError,
)
from docingest.status.base import BaseStatusStore, check_transition
from docingest.status.models import JobState, StatusRecord


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryStatusStore(BaseStatusStore):
    """Process-local status store, safe for concurrent batch workers."""

    def __init__(self) -> None:
        self._records: dict[str, StatusRecord] = {}
        self._lock = threading.Lock()

    def create(self, document_id: str) -> StatusRecord:
        now = _now()
        record = StatusRecord(
            document_id=document_id,
            status=JobState.PENDING,
            progress=0,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            if document_id in self._records:
                raise InvalidStatusTransitionError(f"Document {document_id} is already tracked")
            self._records[document_id] = record
        return replace(record)

    def mark_processing(self, document_id: str) -> None:
        with self._lock:
            record = self._get(document_id)
            check_transition(document_id, record.status, JobState.PROCESSING)
            record.status = JobState.PROCESSING
            record.started_at = record.updated_at = _now()

    def update_progress(self, document_id: str, progress: int) -> None:
        with self._lock:
            record = self._get(document_id)
            if record.status is not JobState.PROCESSING:
                raise InvalidStatusTransitionError(
                    f"Document {document_id} is {record.status.value}, not processing"
                )
            record.progress = max(record.progress, min(progress, 100))
            record.updated_at = _now()

    def mark_completed(self, document_id: str) -> None:
        with self._lock:
            record = self._get(document_id)
            check_transition(document_id, record.status, JobState.COMPLETED)
            record.status = JobState.COMPLETED
            record.progress = 100
            record.updated_at = _now()

    def mark_failed(self, document_id: str, error: str) -> None:
        with self._lock:
            record = self._get(document_id)
            check_transition(document_id, record.status, JobState.FAILED)
            record.status = JobState.FAILED
            record.error_message = error
            record.updated_at = _now()

    def find_by_id(self, document_id: str) -> StatusRecord | None:
        with self._lock:
            record = self._records.get(document_id)
            return replace(record) if record is not None else None

    def _get(self, document_id: str) -> StatusRecord:
        record = self._records.get(document_id)
        if record is None:
            raise DocumentNotFoundError(f"No status tracked for document {document_id}")
        return record
