from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OcrPage:
    """One page boundary reported by the recognition service."""

    number: int
    text: str
    confidence: float | None = None


@dataclass(frozen=True)
class OcrResponse:
    """Recognized text with the service's own confidence estimate."""

    text: str
    confidence: float
    pages: list[OcrPage] = field(default_factory=list)


class BaseOcrService(ABC):
    """Contract for optical character recognition backends."""

    name: str = ""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> OcrResponse:
        """Recognize text in an encoded image.

        Raises:
            OcrError: on any failure.
        """

    def close(self) -> None:
        """Release held connections. Local engines hold none."""
