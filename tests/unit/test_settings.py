import pytest
from pydantic import ValidationError

from docingest.config.settings import DEFAULT_ALLOWED_MIME_TYPES, Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_max_file_size(self) -> None:
        s = Settings()
        assert s.max_file_size_mb == 50
        assert s.max_file_size_bytes == 50 * 1024 * 1024

    def test_default_allowed_types_cover_all_categories(self) -> None:
        s = Settings()
        assert s.allowed_mime_types == DEFAULT_ALLOWED_MIME_TYPES
        assert "application/pdf" in s.allowed_mime_types
        assert "text/plain" in s.allowed_mime_types

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_ocr_engine(self) -> None:
        s = Settings()
        assert s.ocr_engine == "tesseract"
        assert s.ocr_timeout_seconds == 30

    def test_default_status_store(self) -> None:
        s = Settings()
        assert s.status_store == "memory"

    def test_default_batch_workers(self) -> None:
        s = Settings()
        assert s.batch_max_workers == 4


class TestSettingsFromEnv:
    def test_loads_max_file_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_MB", "10")
        s = Settings()
        assert s.max_file_size_bytes == 10 * 1024 * 1024

    def test_loads_allowed_types_from_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_MIME_TYPES", '["application/pdf", "text/plain"]')
        s = Settings()
        assert s.allowed_mime_types == ["application/pdf", "text/plain"]

    def test_loads_ocr_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_ENGINE", "http")
        monkeypatch.setenv("OCR_HTTP_URL", "http://ocr.local/recognize")
        s = Settings()
        assert s.ocr_engine == "http"
        assert s.ocr_http_url == "http://ocr.local/recognize"

    def test_loads_db_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "5433")
        s = Settings()
        assert s.db_port == 5433


class TestSettingsValidation:
    def test_invalid_max_file_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_MB", "fifty")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_batch_workers_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BATCH_MAX_WORKERS", "abc")
        with pytest.raises(ValidationError):
            Settings()
