from docingest.extractors.base import BaseDocumentExtractor
from docingest.logging.logger import Log
from docingest.processor.exceptions import ExtractionError
from docingest.processor.models import DocumentCategory, DocumentJob, ExtractionOutcome


class ExtractionDispatcher:
    """Routes a classified job to the extractor registered for its category."""

    def __init__(
        self,
        extractors: dict[DocumentCategory, BaseDocumentExtractor],
        log: Log | None = None,
    ) -> None:
        missing = set(DocumentCategory) - set(extractors)
        if missing:
            raise ValueError(
                f"No extractor registered for: {sorted(c.value for c in missing)}"
            )
        self._extractors = dict(extractors)
        self._log = log or Log("dispatcher")

    def extract(self, job: DocumentJob, category: DocumentCategory) -> ExtractionOutcome:
        """Run the category's extractor.

        Raises:
            ExtractionError: wrapping any extractor fault with the declared mime type.
        """
        extractor = self._extractors[category]
        try:
            return extractor.extract(job)
        except ExtractionError:
            raise
        except Exception as exc:
            self._log.error(
                f"Text extraction failed for {job.mime_type}: {exc}",
                file_name=job.file_name,
                category=category.value,
            )
            raise ExtractionError(job.mime_type, exc) from exc
