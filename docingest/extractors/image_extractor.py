from dataclasses import asdict

from docingest.extractors.base import BaseDocumentExtractor
from docingest.extractors.confidence import clamp_confidence
from docingest.imaging.preprocessor import ImagePreprocessor
from docingest.logging.logger import Log
from docingest.ocr.base import BaseOcrService
from docingest.processor.models import (
    DocumentJob,
    Extracted,
    ExtractionMethod,
    ExtractionOutcome,
    ExtractionResult,
)


class ImageDocumentExtractor(BaseDocumentExtractor):
    """Preprocesses an image and hands it to the recognition service."""

    def __init__(
        self,
        preprocessor: ImagePreprocessor,
        ocr_service: BaseOcrService,
        log: Log | None = None,
    ) -> None:
        self._preprocessor = preprocessor
        self._ocr_service = ocr_service
        self._log = log or Log("extractors.image")

    def extract(self, job: DocumentJob) -> ExtractionOutcome:
        processed = self._preprocessor.prepare(job.content)
        response = self._ocr_service.recognize(processed)
        self._log.info(
            "Image recognized",
            file_name=job.file_name,
            chars=len(response.text),
            pages=len(response.pages),
        )
        return Extracted(
            ExtractionResult(
                text=response.text,
                confidence=clamp_confidence(response.confidence),
                pages=len(response.pages) or 1,
                method=ExtractionMethod.IMAGE_OCR,
                metadata={
                    "extraction_method": ExtractionMethod.IMAGE_OCR.value,
                    "ocr_engine": self._ocr_service.name,
                    "original_size": len(job.content),
                    "processed_size": len(processed),
                    "ocr_pages": [asdict(page) for page in response.pages],
                },
            )
        )
