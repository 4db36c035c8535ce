from dataclasses import asdict, dataclass, field
from enum import Enum


class DocumentCategory(str, Enum):
    """Closed set of document families the pipeline can extract."""

    PDF = "pdf"
    WORD = "word"
    IMAGE = "image"
    TEXT = "text"


class ExtractionMethod(str, Enum):
    """Tag identifying which code path produced an extraction."""

    PDF_TEXT_LAYER = "pdf-text-layer"
    PDF_OCR_FALLBACK = "ocr-fallback"
    WORD_RAW_TEXT = "python-docx"
    IMAGE_OCR = "image-ocr"
    TEXT_DIRECT = "direct"
    TEXT_FALLBACK = "direct-fallback"


@dataclass(frozen=True)
class DocumentJob:
    """A single uploaded file as received from the transport layer."""

    file_name: str
    mime_type: str
    size_bytes: int
    content: bytes


@dataclass(frozen=True)
class ExtractionResult:
    """Raw output of one format extractor."""

    text: str
    confidence: float
    pages: int
    method: ExtractionMethod
    encoding: str = "UTF-8"
    metadata: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")
        if self.pages < 0:
            raise ValueError(f"pages must be >= 0, got {self.pages}")


@dataclass(frozen=True)
class Extracted:
    """Extraction succeeded; the text may legitimately be empty."""

    result: ExtractionResult


@dataclass(frozen=True)
class Unavailable:
    """Extraction path degraded to a placeholder; no text could be recognized."""

    method: ExtractionMethod
    reason: str
    text: str = ""
    confidence: float = 0.0
    pages: int = 0

    def as_result(self) -> ExtractionResult:
        return ExtractionResult(
            text=self.text,
            confidence=self.confidence,
            pages=self.pages,
            method=self.method,
            metadata={"extraction_method": self.method.value, "unavailable_reason": self.reason},
        )


ExtractionOutcome = Extracted | Unavailable


@dataclass(frozen=True)
class Enrichment:
    """Text-derived metadata."""

    word_count: int
    language: str


@dataclass(frozen=True)
class UploadResult:
    """Location of the stored original file."""

    url: str


@dataclass(frozen=True)
class ProcessedDocument:
    """Final artifact handed to the caller after a successful pipeline run."""

    document_id: str
    original_name: str
    mime_type: str
    size_bytes: int
    storage_url: str
    extracted_text: str
    confidence: float
    pages: int
    word_count: int
    processing_time_ms: int
    metadata: dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class BatchFailure:
    """A job that did not produce a ProcessedDocument."""

    file_name: str
    error: str
    kind: str
    document_id: str | None = None


@dataclass(frozen=True)
class BatchResult:
    """Per-item outcomes of a batch run."""

    successful: list[ProcessedDocument]
    failed: list[BatchFailure]
    total_processed: int

    @property
    def success_rate(self) -> float:
        if self.total_processed == 0:
            return 0.0
        return len(self.successful) / self.total_processed * 100

    def to_dict(self) -> dict[str, object]:
        return {
            "successful": [doc.to_dict() for doc in self.successful],
            "failed": [asdict(failure) for failure in self.failed],
            "total_processed": self.total_processed,
            "success_rate": self.success_rate,
        }
