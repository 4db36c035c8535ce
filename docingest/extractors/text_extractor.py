from docingest.extractors.base import BaseDocumentExtractor
from docingest.extractors.confidence import (
    TEXT_FALLBACK_CONFIDENCE,
    TEXT_UTF8_CONFIDENCE,
    estimate_pages,
)
from docingest.processor.models import (
    DocumentJob,
    Extracted,
    ExtractionMethod,
    ExtractionOutcome,
    ExtractionResult,
)

FALLBACK_ENCODING = "latin-1"


class PlainTextExtractor(BaseDocumentExtractor):
    """Decodes plain text, falling back to a single-byte encoding."""

    def extract(self, job: DocumentJob) -> ExtractionOutcome:
        try:
            text = job.content.decode("utf-8")
        except UnicodeDecodeError:
            return self._decode_fallback(job.content)

        return Extracted(
            ExtractionResult(
                text=text,
                confidence=TEXT_UTF8_CONFIDENCE,
                pages=estimate_pages(text),
                method=ExtractionMethod.TEXT_DIRECT,
                encoding="UTF-8",
                metadata={
                    "extraction_method": ExtractionMethod.TEXT_DIRECT.value,
                    "original_encoding": "UTF-8",
                },
            )
        )

    def _decode_fallback(self, content: bytes) -> ExtractionOutcome:
        # latin-1 maps every byte, so this cannot fail
        text = content.decode(FALLBACK_ENCODING)
        return Extracted(
            ExtractionResult(
                text=text,
                confidence=TEXT_FALLBACK_CONFIDENCE,
                pages=estimate_pages(text),
                method=ExtractionMethod.TEXT_FALLBACK,
                encoding=FALLBACK_ENCODING,
                metadata={
                    "extraction_method": ExtractionMethod.TEXT_FALLBACK.value,
                    "original_encoding": FALLBACK_ENCODING,
                },
            )
        )
