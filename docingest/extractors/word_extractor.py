import io
from collections import Counter

import docx
from docx.document import Document

from docingest.extractors.base import BaseDocumentExtractor
from docingest.extractors.confidence import WORD_CONFIDENCE, estimate_pages
from docingest.processor.models import (
    DocumentJob,
    Extracted,
    ExtractionMethod,
    ExtractionOutcome,
    ExtractionResult,
)

# Related parts python-docx does not expose as text, keyed by relationship type suffix
SKIPPED_PART_KINDS: dict[str, str] = {
    "image": "image",
    "chart": "chart",
    "diagramData": "diagram",
    "oleObject": "embedded object",
    "package": "embedded package",
    "aFChunk": "imported content",
}


def skipped_content_messages(document: Document) -> list[str]:
    """Describe embedded content that the raw text does not include.

    Derived from the document's own relationships, so the result depends only
    on the file being read.
    """
    counts: Counter[str] = Counter()
    for rel in document.part.rels.values():
        if rel.is_external:
            continue
        kind = SKIPPED_PART_KINDS.get(rel.reltype.rsplit("/", 1)[-1])
        if kind is not None:
            counts[kind] += 1
    return [
        f"Skipped {count} {kind} part(s) without extractable text"
        for kind, count in sorted(counts.items())
    ]


class WordDocumentExtractor(BaseDocumentExtractor):
    """Extracts raw paragraph and table text from a Word container."""

    def extract(self, job: DocumentJob) -> ExtractionOutcome:
        document = docx.Document(io.BytesIO(job.content))
        paragraphs = [p.text for p in document.paragraphs]
        table_rows = [
            "\t".join(cell.text for cell in row.cells)
            for table in document.tables
            for row in table.rows
        ]

        text = "\n".join(paragraphs + table_rows).strip()
        return Extracted(
            ExtractionResult(
                text=text,
                confidence=WORD_CONFIDENCE,
                pages=estimate_pages(text),
                method=ExtractionMethod.WORD_RAW_TEXT,
                metadata={
                    "extraction_method": ExtractionMethod.WORD_RAW_TEXT.value,
                    "messages": skipped_content_messages(document),
                    "paragraph_count": len(paragraphs),
                    "table_count": len(document.tables),
                },
            )
        )
