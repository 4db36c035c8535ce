from docingest.enrichment.enricher import MetadataEnricher
from docingest.extractors.dispatcher import ExtractionDispatcher
from docingest.logging.logger import Log
from docingest.processor.assembler import DocumentAssembler
from docingest.processor.exceptions import StorageError
from docingest.processor.models import DocumentJob, Extracted
from docingest.processor.pipeline import PipelineContext, PipelineStep
from docingest.processor.validator import Validator
from docingest.status.base import BaseStatusStore
from docingest.storage.base import BaseBlobStore


def _require_job(context: PipelineContext) -> DocumentJob:
    if context.job is None:
        raise ValueError("PipelineContext.job must be validated before this step")
    return context.job


class MarkProcessingStep(PipelineStep):
    def __init__(self, status_store: BaseStatusStore, log: Log) -> None:
        self._status_store = status_store
        self._log = log

    def run(self, context: PipelineContext) -> PipelineContext:
        self._status_store.mark_processing(context.document_id)
        self._log.info("Document marked as processing", document_id=context.document_id)
        return context


class ReportProgressStep(PipelineStep):
    def __init__(self, status_store: BaseStatusStore, progress: int) -> None:
        self._status_store = status_store
        self._progress = progress

    def run(self, context: PipelineContext) -> PipelineContext:
        self._status_store.update_progress(context.document_id, self._progress)
        return context


class MarkCompletedStep(PipelineStep):
    def __init__(self, status_store: BaseStatusStore, log: Log) -> None:
        self._status_store = status_store
        self._log = log

    def run(self, context: PipelineContext) -> PipelineContext:
        self._status_store.mark_completed(context.document_id)
        self._log.info("Document marked as completed", document_id=context.document_id)
        return context


class MarkFailedStep(PipelineStep):
    def __init__(self, status_store: BaseStatusStore, log: Log) -> None:
        self._status_store = status_store
        self._log = log

    def run(self, context: PipelineContext) -> PipelineContext:
        self._status_store.mark_failed(context.document_id, context.error_message)
        self._log.error(
            f"Document processing failed for {context.file_name}: {context.error_message}",
            document_id=context.document_id,
        )
        return context


class ValidateStep(PipelineStep):
    def __init__(self, validator: Validator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.category = self._validator.validate(context.job)
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, dispatcher: ExtractionDispatcher, log: Log) -> None:
        self._dispatcher = dispatcher
        self._log = log

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.category is None:
            raise ValueError("PipelineContext.category must be set before extraction")
        job = _require_job(context)
        context.outcome = self._dispatcher.extract(job, context.category)
        if isinstance(context.outcome, Extracted):
            self._log.info(
                f"Extracted {len(context.outcome.result.text)} chars",
                document_id=context.document_id,
                method=context.outcome.result.method.value,
            )
        else:
            self._log.warning(
                f"Extraction unavailable: {context.outcome.reason}",
                document_id=context.document_id,
                method=context.outcome.method.value,
            )
        return context


class EnrichStep(PipelineStep):
    def __init__(self, enricher: MetadataEnricher) -> None:
        self._enricher = enricher

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.outcome is None:
            raise ValueError("PipelineContext.outcome must be set before enrichment")
        text = context.outcome.result.text if isinstance(context.outcome, Extracted) else ""
        context.enrichment = self._enricher.enrich(text)
        return context


class UploadStep(PipelineStep):
    def __init__(self, blob_store: BaseBlobStore, log: Log) -> None:
        self._blob_store = blob_store
        self._log = log

    def run(self, context: PipelineContext) -> PipelineContext:
        job = _require_job(context)
        try:
            context.upload = self._blob_store.upload(job.content, job.file_name, job.mime_type)
        except StorageError:
            raise
        except Exception as exc:
            raise StorageError(f"Upload failed for {job.file_name}: {exc}") from exc
        self._log.info(
            "Original file stored", document_id=context.document_id, url=context.upload.url
        )
        return context


class AssembleStep(PipelineStep):
    def __init__(self, assembler: DocumentAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.outcome is None or context.enrichment is None or context.upload is None:
            raise ValueError(
                "PipelineContext.outcome, enrichment and upload must be set before assembly"
            )
        context.document = self._assembler.assemble(
            document_id=context.document_id,
            job=_require_job(context),
            outcome=context.outcome,
            upload=context.upload,
            enrichment=context.enrichment,
            started_at=context.started_at,
        )
        return context
