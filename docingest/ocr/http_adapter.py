from typing import Any

import httpx

from docingest.ocr.base import BaseOcrService, OcrPage, OcrResponse
from docingest.ocr.exceptions import OcrError, OcrNetworkError

# Leading bytes of the encodings the preprocessor can hand over
IMAGE_SIGNATURES: tuple[tuple[bytes, str, str], ...] = (
    (b"\x89PNG", "image.png", "image/png"),
    (b"II*\x00", "image.tiff", "image/tiff"),
    (b"MM\x00*", "image.tiff", "image/tiff"),
    (b"\xff\xd8\xff", "image.jpg", "image/jpeg"),
    (b"GIF8", "image.gif", "image/gif"),
    (b"BM", "image.bmp", "image/bmp"),
)


def upload_part(image_bytes: bytes) -> tuple[str, bytes, str]:
    """Multipart file tuple with a name and content type matching the bytes."""
    for signature, file_name, content_type in IMAGE_SIGNATURES:
        if image_bytes.startswith(signature):
            return file_name, image_bytes, content_type
    return "image.bin", image_bytes, "application/octet-stream"


class HttpOcrAdapter(BaseOcrService):
    """Delegates recognition to a remote service speaking a small JSON contract.

    The service receives the image as a multipart upload and answers with
    ``{"text": str, "confidence": float, "pages": [{"text": str, "confidence": float}]}``.
    """

    name = "http"

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: int,
        api_key: str = "",
        client: httpx.Client | None = None,
    ) -> None:
        if not url:
            raise ValueError("ocr_http_url is required for ocr_engine=http")
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_seconds, headers=headers)

    def recognize(self, image_bytes: bytes) -> OcrResponse:
        try:
            response = self._client.post(
                self._url,
                files={"file": upload_part(image_bytes)},
            )
            response.raise_for_status()
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise OcrNetworkError(f"OCR service network error: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise OcrError(
                f"OCR service returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise OcrNetworkError(f"OCR service error: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise OcrError("OCR service returned invalid JSON") from exc
        return self._parse(payload)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _parse(self, payload: Any) -> OcrResponse:
        if not isinstance(payload, dict):
            raise OcrError("OCR response must be a JSON object")
        text = payload.get("text")
        if not isinstance(text, str):
            raise OcrError("OCR response 'text' must be a string")
        confidence = payload.get("confidence", 0.0)
        if not isinstance(confidence, (int, float)):
            raise OcrError("OCR response 'confidence' must be a number")
        raw_pages = payload.get("pages") or []
        if not isinstance(raw_pages, list):
            raise OcrError("OCR response 'pages' must be a list")
        pages = [
            OcrPage(
                number=index,
                text=str(page.get("text", "")) if isinstance(page, dict) else "",
                confidence=page.get("confidence") if isinstance(page, dict) else None,
            )
            for index, page in enumerate(raw_pages, start=1)
        ]
        return OcrResponse(text=text, confidence=float(confidence), pages=pages)
