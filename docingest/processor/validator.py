"""Size and type checks run before any extraction work."""

from collections.abc import Iterable

from docingest.logging.logger import Log
from docingest.processor.exceptions import ValidationError, ValidationReason
from docingest.processor.models import DocumentCategory, DocumentJob

# Classification order matters: first matching category wins.
CATEGORY_MIME_TYPES: dict[DocumentCategory, tuple[str, ...]] = {
    DocumentCategory.PDF: ("application/pdf",),
    DocumentCategory.WORD: (
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ),
    DocumentCategory.IMAGE: (
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/bmp",
        "image/tiff",
        "image/webp",
    ),
    DocumentCategory.TEXT: ("text/plain",),
}


def _matches(mime_type: str, registered: str) -> bool:
    return mime_type == registered or mime_type.startswith(registered)


def classify(mime_type: str) -> DocumentCategory | None:
    """Resolve a declared mime type to its document category, or None."""
    normalized = mime_type.strip().lower()
    for category, registered_types in CATEGORY_MIME_TYPES.items():
        if any(_matches(normalized, registered) for registered in registered_types):
            return category
    return None


class Validator:
    """Checks a job against the configured size limit and allowed types."""

    def __init__(
        self,
        max_size_bytes: int,
        allowed_mime_types: Iterable[str],
        log: Log | None = None,
    ) -> None:
        self._max_size_bytes = max_size_bytes
        self._allowed = tuple(t.strip().lower() for t in allowed_mime_types if t.strip())
        self._log = log or Log("validator")

    def validate(self, job: DocumentJob | None) -> DocumentCategory:
        """Validate a job and return its resolved category.

        Raises:
            ValidationError: with reason missing-file, oversized or unsupported-type.
        """
        if job is None or job.content is None:
            raise ValidationError(ValidationReason.MISSING_FILE, "No file provided")

        if job.size_bytes > self._max_size_bytes:
            limit_mb = self._max_size_bytes / (1024 * 1024)
            raise ValidationError(
                ValidationReason.OVERSIZED,
                f"File size too large. Maximum allowed: {limit_mb:g}MB",
            )

        mime_type = job.mime_type.strip().lower()
        category = classify(mime_type)
        if category is None or not any(_matches(mime_type, t) for t in self._allowed):
            raise ValidationError(
                ValidationReason.UNSUPPORTED_TYPE,
                f"Unsupported file type: {job.mime_type}. "
                f"Supported types: {', '.join(self._allowed)}",
            )

        self._log.debug("File validated", file_name=job.file_name, category=category.value)
        return category
