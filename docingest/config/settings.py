from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_MIME_TYPES: list[str] = [
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/bmp",
    "image/tiff",
    "image/webp",
    "text/plain",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_file_size_mb: int = 50
    allowed_mime_types: list[str] = DEFAULT_ALLOWED_MIME_TYPES

    pdf_engine: str = "pdfplumber"

    ocr_engine: str = "tesseract"
    ocr_http_url: str = ""
    ocr_http_api_key: str = ""
    ocr_timeout_seconds: int = 30
    tesseract_lang: str = "eng"

    storage_backend: str = "local"
    storage_root: str = "/app/files"

    batch_max_workers: int = 4

    status_store: str = "memory"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "docingest"
    db_username: str = "docingest"
    db_password: str = "secret"

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024
