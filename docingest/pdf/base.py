from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PdfText:
    """Text layer read from a PDF."""

    text: str
    page_count: int
    info: dict[str, object] = field(default_factory=dict)


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    name: str = ""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> PdfText:
        """Extract the embedded text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PdfText with the joined page text, page count and document info.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
