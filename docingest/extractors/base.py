from abc import ABC, abstractmethod

from docingest.processor.models import DocumentJob, ExtractionOutcome


class BaseDocumentExtractor(ABC):
    """Contract for per-category text extractors."""

    @abstractmethod
    def extract(self, job: DocumentJob) -> ExtractionOutcome:
        """Extract text from the job's bytes.

        Returns:
            Extracted with the result, or Unavailable when the path degraded
            to a placeholder.

        Raises:
            Exception: any extractor fault; the dispatcher wraps it.
        """
