"""
Extraction Scheduling
=====================
Runs several document extractions at once under a concurrency cap and a
per-document wall-clock deadline.

Policy:
- at most `max_concurrent` extractions in flight
- a job past its deadline yields "" and is not retried
- only PDF-typed sources within the size cap are dispatched
- outcomes come back in submission order; nothing is raised

Extraction threads cannot be killed. On timeout the job's cancel event is
set and the pipeline stops at the next page boundary; until the thread
actually exits it keeps its slot, so a new job waits rather than
overlapping it.
"""

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from .glyphs import PdfSource
from .pipeline import extract_document_text

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"

STATUS_OK = "ok"
STATUS_SKIPPED = "skipped"
STATUS_TIMEOUT = "timeout"
STATUS_FAILED = "failed"

ExtractFn = Callable[..., str]


@dataclass
class JobPolicy:
    """Scheduling policy for a batch of extractions"""
    max_concurrent: int = 3
    timeout_seconds: float = 30.0
    max_bytes: int = 5 * 1024 * 1024

    @classmethod
    def sync_run(cls) -> 'JobPolicy':
        """Policy used for a multi-course sync"""
        return cls()


@dataclass
class ExtractionJob:
    """One document to extract"""
    label: str
    source: PdfSource
    content_type: Optional[str] = None
    size: Optional[int] = None

    def byte_size(self) -> Optional[int]:
        """Declared size, or measured size for in-memory and on-disk sources"""
        if self.size is not None:
            return self.size
        if isinstance(self.source, (bytes, bytearray)):
            return len(self.source)
        if isinstance(self.source, (str, os.PathLike)) and os.path.isfile(self.source):
            return os.path.getsize(self.source)
        return None


@dataclass
class JobOutcome:
    """Result of one job; text is "" unless status is ok"""
    label: str
    text: str = ""
    status: str = STATUS_OK

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def is_pdf_resource(name: Optional[str], content_type: Optional[str]) -> bool:
    """True for application/pdf content or a .pdf file name"""
    if content_type and content_type.split(";")[0].strip().lower() == PDF_CONTENT_TYPE:
        return True
    return bool(name) and name.lower().endswith(".pdf")


def should_dispatch(job: ExtractionJob, policy: Optional[JobPolicy] = None) -> bool:
    """Only PDFs within the size cap go to the extraction pipeline"""
    policy = policy or JobPolicy()
    if not is_pdf_resource(job.label, job.content_type):
        return False
    size = job.byte_size()
    return size is None or size <= policy.max_bytes


class ExtractionScheduler:
    """
    Bounded worker pool with a per-job deadline.

    Usage:
        scheduler = ExtractionScheduler(JobPolicy(max_concurrent=3))
        outcomes = scheduler.run(jobs)
    """

    def __init__(self, policy: Optional[JobPolicy] = None, extract_fn: Optional[ExtractFn] = None):
        self.policy = policy or JobPolicy()
        self.extract_fn = extract_fn or extract_document_text
        # Held for the life of an extraction thread, including past its deadline
        self._slots = threading.BoundedSemaphore(max(1, self.policy.max_concurrent))

    def run(self, jobs: Sequence[ExtractionJob]) -> List[JobOutcome]:
        """
        Extract every job. Returns one outcome per job, in input order.
        """
        if not jobs:
            return []
        workers = max(1, min(self.policy.max_concurrent, len(jobs)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._run_one, jobs))

    def _run_one(self, job: ExtractionJob) -> JobOutcome:
        if not should_dispatch(job, self.policy):
            logger.warning("Skipping %s: not a PDF or larger than %d bytes",
                           job.label, self.policy.max_bytes)
            return JobOutcome(label=job.label, status=STATUS_SKIPPED)

        cancel_event = threading.Event()
        box: Dict[str, Any] = {}

        def worker():
            try:
                box["text"] = self.extract_fn(job.source, cancel_event=cancel_event, label=job.label)
            except Exception as e:
                box["error"] = e
            finally:
                self._slots.release()

        # Wait for a live slot; an abandoned extraction keeps its slot until it exits
        self._slots.acquire()
        # Deadline runs from job start, not from submission
        thread = threading.Thread(target=worker, daemon=True)
        thread.start()
        thread.join(self.policy.timeout_seconds)

        if thread.is_alive():
            cancel_event.set()
            logger.warning("Extraction of %s timed out after %.1fs", job.label, self.policy.timeout_seconds)
            return JobOutcome(label=job.label, status=STATUS_TIMEOUT)

        if "error" in box:
            logger.warning("Extraction of %s failed: %s", job.label, box["error"])
            return JobOutcome(label=job.label, status=STATUS_FAILED)

        return JobOutcome(label=job.label, text=box.get("text") or "")
