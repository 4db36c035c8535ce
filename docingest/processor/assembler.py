import time
from collections.abc import Callable
from datetime import datetime, timezone

from docingest.processor.models import (
    DocumentJob,
    Enrichment,
    Extracted,
    ExtractionOutcome,
    ProcessedDocument,
    UploadResult,
)


class DocumentAssembler:
    """Combines extraction, enrichment and upload output into a ProcessedDocument."""

    def __init__(
        self,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._monotonic = monotonic

    def assemble(
        self,
        *,
        document_id: str,
        job: DocumentJob,
        outcome: ExtractionOutcome,
        upload: UploadResult,
        enrichment: Enrichment,
        started_at: float,
    ) -> ProcessedDocument:
        if isinstance(outcome, Extracted):
            result = outcome.result
            status = "extracted"
        else:
            result = outcome.as_result()
            status = "unavailable"

        metadata: dict[str, object] = {
            "language": enrichment.language,
            "encoding": result.encoding or "UTF-8",
            "created_at": self._clock().isoformat(),
            "extraction_method": result.method.value,
            "extraction_status": status,
            **result.metadata,
        }
        return ProcessedDocument(
            document_id=document_id,
            original_name=job.file_name,
            mime_type=job.mime_type,
            size_bytes=job.size_bytes,
            storage_url=upload.url,
            extracted_text=result.text,
            confidence=result.confidence,
            pages=result.pages or 1,
            word_count=enrichment.word_count,
            processing_time_ms=int((self._monotonic() - started_at) * 1000),
            metadata=metadata,
        )
