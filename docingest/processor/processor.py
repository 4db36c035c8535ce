import time
import uuid
from collections.abc import Callable, Sequence
from pathlib import Path

from docingest.config.settings import Settings
from docingest.enrichment.enricher import MetadataEnricher
from docingest.extractors.dispatcher import ExtractionDispatcher
from docingest.extractors.image_extractor import ImageDocumentExtractor
from docingest.extractors.pdf_extractor import PdfDocumentExtractor
from docingest.extractors.text_extractor import PlainTextExtractor
from docingest.extractors.word_extractor import WordDocumentExtractor
from docingest.imaging.preprocessor import ImagePreprocessor
from docingest.logging.logger import Log
from docingest.ocr.factory import OcrServiceFactory
from docingest.pdf.factory import PdfExtractorFactory
from docingest.processor.assembler import DocumentAssembler
from docingest.processor.exceptions import IngestionError
from docingest.processor.models import DocumentCategory, DocumentJob, ProcessedDocument
from docingest.processor.pipeline import PipelineContext, PipelineStep
from docingest.processor.steps import (
    AssembleStep,
    EnrichStep,
    ExtractTextStep,
    MarkCompletedStep,
    MarkFailedStep,
    MarkProcessingStep,
    ReportProgressStep,
    UploadStep,
    ValidateStep,
)
from docingest.processor.validator import Validator
from docingest.status.base import BaseStatusStore
from docingest.status.factory import StatusStoreFactory
from docingest.status.reporter import StatusReporter
from docingest.storage.factory import BlobStoreFactory


class Processor:
    """Orchestrates the document pipeline for a single job.

    Pipeline: validate -> extract -> enrich -> upload -> assemble, with the
    job's status tracked from pending to completed or failed.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        failed_step: PipelineStep,
        status_store: BaseStatusStore,
        log: Log | None = None,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
        closers: Sequence[Callable[[], None]] = (),
    ) -> None:
        self._steps = list(steps)
        self._failed_step = failed_step
        self._status_store = status_store
        self._reporter = StatusReporter(status_store)
        self._log = log or Log("processor")
        self._id_factory = id_factory
        self._closers = list(closers)

    @property
    def status_store(self) -> BaseStatusStore:
        return self._status_store

    @property
    def reporter(self) -> StatusReporter:
        """Status view over the jobs this processor has tracked."""
        return self._reporter

    def new_document_id(self) -> str:
        return self._id_factory()

    def close(self) -> None:
        """Release adapter connections held by the pipeline."""
        for close in self._closers:
            close()

    def process(
        self, job: DocumentJob | None, document_id: str | None = None
    ) -> ProcessedDocument:
        """Run the full pipeline and return the assembled document.

        Args:
            job: The uploaded file; None is reported as a missing file.
            document_id: Id to track the job under. A fresh one is generated
                when omitted.

        Raises:
            IngestionError: the first failure of any step, after the job is marked
                failed. Its ``document_id`` names the failed status record.
        """
        context = PipelineContext(
            document_id=document_id or self.new_document_id(),
            job=job,
            started_at=time.monotonic(),
        )
        self._status_store.create(context.document_id)
        self._log.info(
            f"Starting document processing for: {context.file_name}",
            document_id=context.document_id,
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            if isinstance(exc, IngestionError):
                exc.document_id = context.document_id
            self._run_failed_step(context)
            raise

        if context.document is None:
            raise RuntimeError("Pipeline finished without assembling a document")
        self._log.info(
            f"Document processed successfully in {context.document.processing_time_ms}ms",
            document_id=context.document_id,
        )
        return context.document

    def _run_failed_step(self, context: PipelineContext) -> None:
        try:
            self._failed_step.run(context)
        except Exception as exc:
            # The original failure is what the caller needs to see
            self._log.error(
                f"Could not record failure: {exc}",
                document_id=context.document_id,
            )


def build_processor(
    settings: Settings,
    status_store: BaseStatusStore | None = None,
    storage_root: Path | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    store = status_store if status_store is not None else StatusStoreFactory.create(settings)
    log = Log("processor")

    validator = Validator(
        max_size_bytes=settings.max_file_size_bytes,
        allowed_mime_types=settings.allowed_mime_types,
        log=log.child("validator"),
    )
    ocr_service = OcrServiceFactory.create(settings)
    dispatcher = ExtractionDispatcher(
        {
            DocumentCategory.PDF: PdfDocumentExtractor(
                PdfExtractorFactory.create(settings), log=log.child("pdf")
            ),
            DocumentCategory.WORD: WordDocumentExtractor(),
            DocumentCategory.IMAGE: ImageDocumentExtractor(
                preprocessor=ImagePreprocessor(log=log.child("imaging")),
                ocr_service=ocr_service,
                log=log.child("image"),
            ),
            DocumentCategory.TEXT: PlainTextExtractor(),
        },
        log=log.child("dispatcher"),
    )
    blob_store = BlobStoreFactory.create(settings, storage_root=storage_root)

    steps: list[PipelineStep] = [
        MarkProcessingStep(store, log=log),
        ValidateStep(validator),
        ReportProgressStep(store, progress=20),
        ExtractTextStep(dispatcher, log=log),
        ReportProgressStep(store, progress=60),
        EnrichStep(MetadataEnricher()),
        ReportProgressStep(store, progress=70),
        UploadStep(blob_store, log=log),
        ReportProgressStep(store, progress=90),
        AssembleStep(DocumentAssembler()),
        MarkCompletedStep(store, log=log),
    ]
    return Processor(
        steps=steps,
        failed_step=MarkFailedStep(store, log=log),
        status_store=store,
        log=log,
        closers=[ocr_service.close],
    )
