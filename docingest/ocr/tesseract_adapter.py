import io

import pytesseract
from PIL import Image

from docingest.ocr.base import BaseOcrService, OcrPage, OcrResponse
from docingest.ocr.exceptions import OcrError


class TesseractOcrAdapter(BaseOcrService):
    """Recognizes text locally with the Tesseract engine."""

    name = "tesseract"

    def __init__(self, lang: str = "eng", timeout_seconds: int = 30) -> None:
        self._lang = lang
        self._timeout_seconds = timeout_seconds

    def recognize(self, image_bytes: bytes) -> OcrResponse:
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                pages: list[OcrPage] = []
                for index in range(getattr(img, "n_frames", 1)):
                    img.seek(index)
                    pages.append(self._recognize_frame(img.convert("RGB"), index + 1))
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc

        scored = [p.confidence for p in pages if p.confidence is not None]
        confidence = sum(scored) / len(scored) if scored else 0.0
        text = "\n\n".join(p.text for p in pages if p.text)
        return OcrResponse(text=text, confidence=confidence, pages=pages)

    def _recognize_frame(self, frame: Image.Image, number: int) -> OcrPage:
        data = pytesseract.image_to_data(
            frame,
            lang=self._lang,
            output_type=pytesseract.Output.DICT,
            timeout=self._timeout_seconds,
        )
        words: list[str] = []
        confidences: list[float] = []
        for word, conf in zip(data["text"], data["conf"]):
            # Tesseract reports -1 for layout boxes without text
            if not word.strip() or float(conf) < 0:
                continue
            words.append(word)
            confidences.append(float(conf) / 100.0)
        confidence = sum(confidences) / len(confidences) if confidences else None
        return OcrPage(number=number, text=" ".join(words), confidence=confidence)
