from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from docingest.logging.logger import Log
from docingest.processor.models import (
    BatchFailure,
    BatchResult,
    DocumentJob,
    ProcessedDocument,
)
from docingest.processor.processor import Processor

T = TypeVar("T")


@dataclass(frozen=True)
class JobSucceeded:
    document: ProcessedDocument


@dataclass(frozen=True)
class JobFailed:
    failure: BatchFailure


JobOutcome = JobSucceeded | JobFailed


class BatchCoordinator:
    """Runs the pipeline over many jobs with per-item failure isolation.

    Jobs fan out over a bounded thread pool so that at most ``max_workers``
    files are held in memory at once; outcomes are collected in submission
    order. Every failure carries the document id its status was tracked
    under, so the processor's reporter can be asked about it later.
    """

    def __init__(self, processor: Processor, max_workers: int = 4, log: Log | None = None) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._processor = processor
        self._max_workers = max_workers
        self._log = log or Log("batch")

    def process_many(self, jobs: Sequence[DocumentJob | None]) -> BatchResult:
        return self._fan_out(jobs, self._run_one)

    def process_files(
        self, paths: Sequence[Path], loader: Callable[[Path], DocumentJob]
    ) -> BatchResult:
        """Read and process files, loading each one inside its own worker.

        A file that cannot be read fails on its own without a status record.
        """
        return self._fan_out(paths, lambda path: self._load_and_run(path, loader))

    def _fan_out(self, items: Sequence[T], run: Callable[[T], JobOutcome]) -> BatchResult:
        if not items:
            return BatchResult(successful=[], failed=[], total_processed=0)

        workers = min(self._max_workers, len(items))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="docingest") as pool:
            outcomes = list(pool.map(run, items))

        successful = [o.document for o in outcomes if isinstance(o, JobSucceeded)]
        failed = [o.failure for o in outcomes if isinstance(o, JobFailed)]
        result = BatchResult(successful=successful, failed=failed, total_processed=len(items))
        self._log.info(
            "Batch finished",
            total=result.total_processed,
            successful=len(successful),
            failed=len(failed),
            success_rate=f"{result.success_rate:.2f}",
        )
        return result

    def _load_and_run(self, path: Path, loader: Callable[[Path], DocumentJob]) -> JobOutcome:
        try:
            job = loader(path)
        except Exception as exc:
            self._log.error(f"Could not read {path}: {exc}")
            return JobFailed(
                BatchFailure(file_name=path.name, error=str(exc), kind=type(exc).__name__)
            )
        return self._run_one(job)

    def _run_one(self, job: DocumentJob | None) -> JobOutcome:
        file_name = job.file_name if job is not None else "<missing>"
        document_id = self._processor.new_document_id()
        try:
            return JobSucceeded(self._processor.process(job, document_id=document_id))
        except Exception as exc:
            return JobFailed(
                BatchFailure(
                    file_name=file_name,
                    error=str(exc),
                    kind=type(exc).__name__,
                    document_id=document_id,
                )
            )
