from abc import ABC, abstractmethod
from dataclasses import dataclass

from docingest.processor.models import (
    DocumentCategory,
    DocumentJob,
    Enrichment,
    ExtractionOutcome,
    ProcessedDocument,
    UploadResult,
)


@dataclass(slots=True)
class PipelineContext:
    document_id: str
    job: DocumentJob | None
    started_at: float
    category: DocumentCategory | None = None
    outcome: ExtractionOutcome | None = None
    enrichment: Enrichment | None = None
    upload: UploadResult | None = None
    document: ProcessedDocument | None = None
    error_message: str = ""

    @property
    def file_name(self) -> str:
        return self.job.file_name if self.job is not None else "<missing>"


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
