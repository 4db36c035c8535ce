from enum import Enum


class IngestionError(Exception):
    """Base exception for all ingestion-related errors.

    ``document_id`` is filled in by the processor once the failing job has a
    status record, so callers can look the failure up afterwards.
    """

    document_id: str | None = None


class ValidationReason(str, Enum):
    MISSING_FILE = "missing-file"
    OVERSIZED = "oversized"
    UNSUPPORTED_TYPE = "unsupported-type"


class ValidationError(IngestionError):
    """Raised when a submitted file fails size or type constraints."""

    def __init__(self, reason: ValidationReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class ExtractionError(IngestionError):
    """Raised when a format extractor fails; wraps the cause and mime type."""

    def __init__(self, mime_type: str, cause: BaseException) -> None:
        super().__init__(f"Text extraction failed for {mime_type}: {cause}")
        self.mime_type = mime_type
        self.cause = cause


class StorageError(IngestionError):
    """Raised when the original file cannot be uploaded to the blob store."""


class DocumentNotFoundError(IngestionError):
    """Raised when no processing status exists for a document id."""


class InvalidStatusTransitionError(IngestionError):
    """Raised when a status change would leave the job state machine."""
