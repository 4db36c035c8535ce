from docingest.config.settings import Settings
from docingest.ocr.base import BaseOcrService
from docingest.ocr.http_adapter import HttpOcrAdapter
from docingest.ocr.tesseract_adapter import TesseractOcrAdapter


class OcrServiceFactory:
    """Creates the configured recognition backend."""

    ENGINES = ("tesseract", "http")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrService:
        engine = settings.ocr_engine.lower()
        if engine == "tesseract":
            return TesseractOcrAdapter(
                lang=settings.tesseract_lang,
                timeout_seconds=settings.ocr_timeout_seconds,
            )
        if engine == "http":
            return HttpOcrAdapter(
                url=settings.ocr_http_url,
                timeout_seconds=settings.ocr_timeout_seconds,
                api_key=settings.ocr_http_api_key,
            )
        raise ValueError(f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}")
