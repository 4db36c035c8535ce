"""Status store backed by the ``document_status`` table.

Expected schema::

    CREATE TABLE document_status (
        document_id   TEXT PRIMARY KEY,
        status        TEXT NOT NULL,
        progress      INTEGER NOT NULL DEFAULT 0,
        error_message TEXT,
        started_at    TIMESTAMPTZ,
        created_at    TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at    TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
"""

from typing import Any

from psycopg.rows import dict_row

from docingest.database.connection import get_connection
from docingest.processor.exceptions import (
    DocumentNotFoundError,
    InvalidStatusTransitionError,
)
from docingest.status.base import BaseStatusStore, check_transition
from docingest.status.models import JobState, StatusRecord


class PostgresStatusStore(BaseStatusStore):
    """Database operations for the document_status table."""

    def create(self, document_id: str) -> StatusRecord:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO document_status (document_id, status, progress)
                    VALUES (%s, 'pending', 0)
                    ON CONFLICT (document_id) DO NOTHING
                    RETURNING document_id, status, progress, error_message,
                              started_at, created_at, updated_at
                    """,
                    (document_id,),
                )
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise InvalidStatusTransitionError(f"Document {document_id} is already tracked")
        return self._to_record(row)

    def mark_processing(self, document_id: str) -> None:
        self._transition(
            document_id,
            JobState.PROCESSING,
            """
            UPDATE document_status
            SET status = 'processing', started_at = NOW(), updated_at = NOW()
            WHERE document_id = %s AND status = %s
            """,
            (document_id,),
        )

    def update_progress(self, document_id: str, progress: int) -> None:
        with get_connection() as conn:
            cur = conn.execute(
                """
                UPDATE document_status
                SET progress = GREATEST(progress, LEAST(%s, 100)), updated_at = NOW()
                WHERE document_id = %s AND status = 'processing'
                """,
                (progress, document_id),
            )
            conn.commit()
        if cur.rowcount == 0:
            record = self._require(document_id)
            raise InvalidStatusTransitionError(
                f"Document {document_id} is {record.status.value}, not processing"
            )

    def mark_completed(self, document_id: str) -> None:
        self._transition(
            document_id,
            JobState.COMPLETED,
            """
            UPDATE document_status
            SET status = 'completed', progress = 100, updated_at = NOW()
            WHERE document_id = %s AND status = %s
            """,
            (document_id,),
        )

    def mark_failed(self, document_id: str, error: str) -> None:
        self._transition(
            document_id,
            JobState.FAILED,
            """
            UPDATE document_status
            SET status = 'failed', error_message = %s, updated_at = NOW()
            WHERE document_id = %s AND status = %s
            """,
            (error, document_id),
        )

    def find_by_id(self, document_id: str) -> StatusRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT document_id, status, progress, error_message,
                           started_at, created_at, updated_at
                    FROM document_status
                    WHERE document_id = %s
                    """,
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._to_record(row)

    def _transition(
        self,
        document_id: str,
        target: JobState,
        query: str,
        params: tuple[Any, ...],
    ) -> None:
        """Apply an UPDATE guarded by the current state read in the same transaction."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    "SELECT status FROM document_status WHERE document_id = %s FOR UPDATE",
                    (document_id,),
                )
                row = cur.fetchone()
                if row is None:
                    conn.rollback()
                    raise DocumentNotFoundError(f"No status tracked for document {document_id}")
                current = JobState(row["status"])
                try:
                    check_transition(document_id, current, target)
                except InvalidStatusTransitionError:
                    conn.rollback()
                    raise
                cur.execute(query, (*params, current.value))
            conn.commit()

    def _require(self, document_id: str) -> StatusRecord:
        record = self.find_by_id(document_id)
        if record is None:
            raise DocumentNotFoundError(f"No status tracked for document {document_id}")
        return record

    @staticmethod
    def _to_record(row: dict[str, Any]) -> StatusRecord:
        return StatusRecord(
            document_id=row["document_id"],
            status=JobState(row["status"]),
            progress=row["progress"],
            error_message=row["error_message"],
            started_at=row["started_at"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
