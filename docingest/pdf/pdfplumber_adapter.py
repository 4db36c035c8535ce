import io

import pdfplumber

from docingest.pdf.base import BasePdfExtractor, PdfText
from docingest.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    name = "pdfplumber"

    def extract(self, pdf_bytes: bytes) -> PdfText:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
                info = {key: str(value) for key, value in (pdf.metadata or {}).items()}
            return PdfText(text="\n".join(pages).strip(), page_count=len(pages), info=info)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
