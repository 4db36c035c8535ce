from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from docingest.processor.exceptions import DocumentNotFoundError
from docingest.status.base import BaseStatusStore
from docingest.status.memory_store import InMemoryStatusStore
from docingest.status.models import JobState, StatusRecord
from docingest.status.reporter import StatusReporter

STARTED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _make_reporter(record: StatusRecord | None, now: datetime) -> StatusReporter:
    store = MagicMock(spec=BaseStatusStore)
    store.find_by_id.return_value = record
    return StatusReporter(store, clock=lambda: now)


class TestStatus:
    def test_reports_completed_job(self) -> None:
        store = InMemoryStatusStore()
        store.create("doc-1")
        store.mark_processing("doc-1")
        store.mark_completed("doc-1")

        status = StatusReporter(store).status("doc-1")

        assert status.document_id == "doc-1"
        assert status.status is JobState.COMPLETED
        assert status.progress == 100
        assert status.estimated_time_remaining == 0.0

    def test_reports_failed_job_with_error(self) -> None:
        store = InMemoryStatusStore()
        store.create("doc-1")
        store.mark_failed("doc-1", "Unsupported file type")

        status = StatusReporter(store).status("doc-1")

        assert status.status is JobState.FAILED
        assert status.error_message == "Unsupported file type"
        assert status.estimated_time_remaining == 0.0

    def test_unknown_document_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError):
            StatusReporter(InMemoryStatusStore()).status("missing")


class TestEstimatedTimeRemaining:
    def test_extrapolates_from_progress(self) -> None:
        record = StatusRecord(
            document_id="doc-1", status=JobState.PROCESSING, progress=25, started_at=STARTED
        )
        reporter = _make_reporter(record, now=STARTED + timedelta(seconds=3))

        assert reporter.status("doc-1").estimated_time_remaining == pytest.approx(9.0)

    def test_unknown_before_any_progress(self) -> None:
        record = StatusRecord(
            document_id="doc-1", status=JobState.PROCESSING, progress=0, started_at=STARTED
        )
        reporter = _make_reporter(record, now=STARTED + timedelta(seconds=3))

        assert reporter.status("doc-1").estimated_time_remaining is None

    def test_unknown_while_pending(self) -> None:
        record = StatusRecord(document_id="doc-1", status=JobState.PENDING, progress=0)
        reporter = _make_reporter(record, now=STARTED)

        status = reporter.status("doc-1")
        assert status.status is JobState.PENDING
        assert status.estimated_time_remaining is None
