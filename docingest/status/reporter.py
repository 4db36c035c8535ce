from collections.abc import Callable
from datetime import datetime, timezone

from docingest.processor.exceptions import DocumentNotFoundError
from docingest.status.base import BaseStatusStore
from docingest.status.models import ProcessingStatus, StatusRecord


class StatusReporter:
    """Exposes the processing state of previously submitted documents."""

    def __init__(
        self,
        store: BaseStatusStore,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._store = store
        self._clock = clock

    def status(self, document_id: str) -> ProcessingStatus:
        """Return the current status.

        Raises:
            DocumentNotFoundError: if the document id was never submitted.
        """
        record = self._store.find_by_id(document_id)
        if record is None:
            raise DocumentNotFoundError(f"No status tracked for document {document_id}")
        return ProcessingStatus(
            document_id=record.document_id,
            status=record.status,
            progress=record.progress,
            estimated_time_remaining=self._estimate_remaining(record),
            error_message=record.error_message,
        )

    def _estimate_remaining(self, record: StatusRecord) -> float | None:
        """Extrapolate seconds left from elapsed time and progress so far."""
        if record.status.is_terminal:
            return 0.0
        if record.progress <= 0 or record.started_at is None:
            return None
        elapsed = (self._clock() - record.started_at).total_seconds()
        return max(0.0, elapsed * (100 - record.progress) / record.progress)
