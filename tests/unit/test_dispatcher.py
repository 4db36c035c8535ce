from unittest.mock import MagicMock

import pytest

from docingest.extractors.base import BaseDocumentExtractor
from docingest.extractors.dispatcher import ExtractionDispatcher
from docingest.ocr.exceptions import OcrError
from docingest.processor.exceptions import ExtractionError
from docingest.processor.models import (
    DocumentCategory,
    DocumentJob,
    Extracted,
    ExtractionMethod,
    ExtractionResult,
)


def _make_job(mime_type: str = "image/png") -> DocumentJob:
    return DocumentJob(file_name="scan.png", mime_type=mime_type, size_bytes=3, content=b"abc")


def _make_dispatcher() -> tuple[ExtractionDispatcher, dict[DocumentCategory, MagicMock]]:
    extractors = {category: MagicMock(spec=BaseDocumentExtractor) for category in DocumentCategory}
    return ExtractionDispatcher(extractors), extractors


class TestRouting:
    @pytest.mark.parametrize("category", list(DocumentCategory))
    def test_invokes_only_matching_extractor(self, category: DocumentCategory) -> None:
        dispatcher, extractors = _make_dispatcher()
        expected = Extracted(
            ExtractionResult(text="t", confidence=1.0, pages=1, method=ExtractionMethod.TEXT_DIRECT)
        )
        extractors[category].extract.return_value = expected
        job = _make_job()

        outcome = dispatcher.extract(job, category)

        assert outcome is expected
        extractors[category].extract.assert_called_once_with(job)
        for other, extractor in extractors.items():
            if other is not category:
                extractor.extract.assert_not_called()

    def test_requires_extractor_for_every_category(self) -> None:
        with pytest.raises(ValueError, match="No extractor registered"):
            ExtractionDispatcher({DocumentCategory.PDF: MagicMock(spec=BaseDocumentExtractor)})


class TestErrorWrapping:
    def test_wraps_faults_with_mime_type(self) -> None:
        dispatcher, extractors = _make_dispatcher()
        cause = OcrError("service down")
        extractors[DocumentCategory.IMAGE].extract.side_effect = cause

        with pytest.raises(ExtractionError, match="image/png: service down") as exc_info:
            dispatcher.extract(_make_job(), DocumentCategory.IMAGE)

        assert exc_info.value.mime_type == "image/png"
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    def test_does_not_double_wrap(self) -> None:
        dispatcher, extractors = _make_dispatcher()
        original = ExtractionError("image/png", RuntimeError("x"))
        extractors[DocumentCategory.IMAGE].extract.side_effect = original

        with pytest.raises(ExtractionError) as exc_info:
            dispatcher.extract(_make_job(), DocumentCategory.IMAGE)

        assert exc_info.value is original
