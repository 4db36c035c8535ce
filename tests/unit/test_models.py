import pytest

from docingest.processor.models import (
    BatchFailure,
    BatchResult,
    ExtractionMethod,
    ExtractionResult,
    ProcessedDocument,
    Unavailable,
)


def _make_document(document_id: str = "doc-1") -> ProcessedDocument:
    return ProcessedDocument(
        document_id=document_id,
        original_name="a.txt",
        mime_type="text/plain",
        size_bytes=1,
        storage_url="file:///tmp/a.txt",
        extracted_text="a",
        confidence=1.0,
        pages=1,
        word_count=1,
        processing_time_ms=3,
    )


class TestExtractionResult:
    @pytest.mark.parametrize("confidence", [-0.01, 1.01])
    def test_rejects_confidence_outside_unit_interval(self, confidence: float) -> None:
        with pytest.raises(ValueError, match="confidence"):
            ExtractionResult(
                text="", confidence=confidence, pages=0, method=ExtractionMethod.TEXT_DIRECT
            )

    def test_rejects_negative_pages(self) -> None:
        with pytest.raises(ValueError, match="pages"):
            ExtractionResult(text="", confidence=1.0, pages=-1, method=ExtractionMethod.TEXT_DIRECT)

    def test_defaults(self) -> None:
        result = ExtractionResult(
            text="x", confidence=0.5, pages=1, method=ExtractionMethod.IMAGE_OCR
        )
        assert result.encoding == "UTF-8"
        assert result.metadata == {}


class TestUnavailable:
    def test_placeholder_values(self) -> None:
        outcome = Unavailable(method=ExtractionMethod.PDF_OCR_FALLBACK, reason="no OCR")
        assert (outcome.text, outcome.confidence, outcome.pages) == ("", 0.0, 0)
        assert outcome.as_result().metadata["unavailable_reason"] == "no OCR"


class TestBatchResult:
    def test_success_rate(self) -> None:
        result = BatchResult(
            successful=[_make_document("1"), _make_document("2")],
            failed=[BatchFailure(file_name="x.zip", error="Unsupported", kind="ValidationError")],
            total_processed=3,
        )
        assert result.success_rate == pytest.approx(66.67, abs=0.01)

    def test_success_rate_is_zero_for_empty_batch(self) -> None:
        assert BatchResult(successful=[], failed=[], total_processed=0).success_rate == 0.0

    def test_to_dict(self) -> None:
        result = BatchResult(successful=[_make_document()], failed=[], total_processed=1)
        data = result.to_dict()
        assert data["success_rate"] == 100.0
        assert data["total_processed"] == 1
        assert data["successful"][0]["document_id"] == "doc-1"  # type: ignore[index]
