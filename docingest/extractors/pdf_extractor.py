from docingest.extractors.base import BaseDocumentExtractor
from docingest.extractors.confidence import PDF_TEXT_LAYER_CONFIDENCE
from docingest.logging.logger import Log
from docingest.pdf.base import BasePdfExtractor
from docingest.processor.models import (
    DocumentJob,
    Extracted,
    ExtractionMethod,
    ExtractionOutcome,
    ExtractionResult,
    Unavailable,
)


class PdfDocumentExtractor(BaseDocumentExtractor):
    """Reads the embedded text layer, degrading to the OCR fallback on any fault."""

    def __init__(self, engine: BasePdfExtractor, log: Log | None = None) -> None:
        self._engine = engine
        self._log = log or Log("extractors.pdf")

    def extract(self, job: DocumentJob) -> ExtractionOutcome:
        try:
            pdf_text = self._engine.extract(job.content)
        except Exception as exc:
            self._log.error(f"PDF extraction failed: {exc}", file_name=job.file_name)
            return self._extract_with_ocr(job)

        return Extracted(
            ExtractionResult(
                text=pdf_text.text,
                confidence=PDF_TEXT_LAYER_CONFIDENCE,
                pages=pdf_text.page_count,
                method=ExtractionMethod.PDF_TEXT_LAYER,
                metadata={
                    "extraction_method": ExtractionMethod.PDF_TEXT_LAYER.value,
                    "pdf_engine": self._engine.name,
                    "info": pdf_text.info,
                },
            )
        )

    def _extract_with_ocr(self, job: DocumentJob) -> ExtractionOutcome:
        # Rasterizing pages for recognition is not wired up yet; callers get an
        # explicit placeholder instead of an error.
        self._log.warning("PDF OCR fallback not available", file_name=job.file_name)
        return Unavailable(
            method=ExtractionMethod.PDF_OCR_FALLBACK,
            reason="PDF text layer unreadable and OCR fallback is not available",
        )
