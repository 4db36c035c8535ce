import argparse
import json
import mimetypes
import sys
from pathlib import Path

from docingest.batch.coordinator import BatchCoordinator
from docingest.config.settings import Settings
from docingest.database.connection import close_pool, init_pool
from docingest.logging.logger import Log
from docingest.processor.models import DocumentJob
from docingest.processor.processor import build_processor

FALLBACK_MIME_TYPE = "application/octet-stream"


def load_job(path: Path) -> DocumentJob:
    """Read a file from disk into a job, guessing its mime type from the name."""
    content = path.read_bytes()
    mime_type, _ = mimetypes.guess_type(path.name)
    return DocumentJob(
        file_name=path.name,
        mime_type=mime_type or FALLBACK_MIME_TYPE,
        size_bytes=len(content),
        content=content,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build pipeline -> process files as one batch."""
    parser = argparse.ArgumentParser(description="Extract text from documents.")
    parser.add_argument("files", nargs="+", type=Path, help="documents to ingest")
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    uses_db = settings.status_store.lower() == "postgres"
    if uses_db:
        init_pool(settings)

    try:
        processor = build_processor(settings)
        try:
            coordinator = BatchCoordinator(processor, max_workers=settings.batch_max_workers)
            result = coordinator.process_files(args.files, load_job)
        finally:
            processor.close()
    finally:
        if uses_db:
            close_pool()

    json.dump(result.to_dict(), sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0 if not result.failed else 1


if __name__ == "__main__":
    sys.exit(main())
