"""
Reconstruction Pipeline
=======================
Single entry point for turning positioned PDF runs into reading-order text.
Orchestrates: Items -> TextRun -> ColumnDetector -> Line assembly -> Yield check

The document boundary never raises. Decode errors, cancellation and
zero-page documents all come back as "" with the reason in the DebugBundle.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .types import Item, TextRun, runs_from_items, visible_runs
from .page_model import assemble_lines
from .columns import ColumnDetector, ColumnConfig
from .diagnostics import YieldConfig, check_yield
from .glyphs import ExtractionCancelled, PdfSource, open_document, iter_document_items

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


@dataclass
class PipelineConfig:
    """Complete pipeline configuration"""
    column_config: ColumnConfig = field(default_factory=ColumnConfig)
    yield_config: YieldConfig = field(default_factory=YieldConfig)

    # Debug
    debug: bool = False

    @classmethod
    def default(cls) -> 'PipelineConfig':
        """Column detection on, tuned thresholds"""
        return cls()

    @classmethod
    def single_column(cls) -> 'PipelineConfig':
        """Column detection off: every page read as one column"""
        return cls(column_config=ColumnConfig(enabled=False))


@dataclass
class DebugBundle:
    """Debug information from pipeline run"""
    source: str = "document"
    page_count: int = 0
    run_count: int = 0
    char_count: int = 0
    two_column_pages: List[int] = field(default_factory=list)
    empty_pages: List[int] = field(default_factory=list)

    low_yield: bool = False
    failed: bool = False
    cancelled: bool = False
    error: str = ""

    def summary(self) -> str:
        """Generate summary string"""
        lines = [
            "=" * 60,
            "LAYOUT ENGINE DEBUG SUMMARY",
            "=" * 60,
            f"Source: {self.source}",
            f"Pages: {self.page_count}",
            f"Text Runs: {self.run_count}",
            f"Characters: {self.char_count}",
            f"Two-Column Pages: {self.two_column_pages}",
            f"Empty Pages: {self.empty_pages}",
            "",
            f"Low Yield: {self.low_yield}",
            f"Failed: {self.failed}",
            f"Cancelled: {self.cancelled}",
        ]
        if self.error:
            lines.append(f"Error: {self.error}")
        lines.append("=" * 60)
        return "\n".join(lines)


class ReconstructionPipeline:
    """
    Main reading-order reconstruction pipeline.

    Usage:
        pipeline = ReconstructionPipeline()
        text, debug = pipeline.reconstruct_pages(pages_of_items)
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig.default()
        self.detector = ColumnDetector(self.config.column_config)

    def reconstruct_page(self, runs: Iterable[TextRun], debug: Optional[DebugBundle] = None,
                         page_num: int = 0) -> str:
        """
        Rebuild one page's text in reading order.

        Two-column pages are read left column first, then right column,
        whatever order the runs arrived in.
        """
        runs = visible_runs(runs)
        if not runs:
            return ""

        boundary = self.detector.detect(runs)
        if boundary is None:
            return assemble_lines(runs)

        if debug is not None:
            debug.two_column_pages.append(page_num)
        left, right = self.detector.split(runs, boundary)
        parts = [assemble_lines(left), assemble_lines(right)]
        return "\n".join(p for p in parts if p)

    def reconstruct_pages(
        self,
        pages: Iterable[Sequence[Item]],
        source: str = "document"
    ) -> Tuple[str, DebugBundle]:
        """
        Reconstruct a whole document from per-page decoder items.

        Args:
            pages: Items for each page, in page order
            source: Label for logs and the debug bundle

        Returns:
            Tuple of (document_text, debug_bundle)

        Raises ValueError on a malformed item; callers wanting the
        never-throw contract go through run_reconstruction_pipeline().
        """
        debug = DebugBundle(source=source)
        page_texts: List[str] = []

        for page_num, items in enumerate(pages, start=1):
            runs = runs_from_items(items)
            text = self.reconstruct_page(runs, debug=debug, page_num=page_num)
            debug.page_count += 1
            debug.run_count += len(runs)
            if not text:
                debug.empty_pages.append(page_num)
            page_texts.append(text)
            logger.debug("%s page %d: %d runs -> %d chars", source, page_num, len(runs), len(text))

        document = PAGE_SEPARATOR.join(page_texts).strip()
        debug.char_count = len(document)

        report = check_yield(document, debug.page_count, self.config.yield_config, source=source)
        debug.low_yield = report.low_yield

        if self.config.debug:
            print(f"[PIPELINE] {source}: {debug.page_count} pages, {debug.run_count} runs")
            print(f"[PIPELINE] Two-column pages: {debug.two_column_pages}")
            print(f"[PIPELINE] {report.summary()}")

        return document, debug


def run_reconstruction_pipeline(
    source: PdfSource,
    config: Optional[PipelineConfig] = None,
    cancel_event: Optional[threading.Event] = None,
    label: Optional[str] = None
) -> Tuple[str, DebugBundle]:
    """
    Run the pipeline on a PDF path, bytes, or binary file object.

    Best-effort text, never throws: any failure on any page fails the whole
    document and yields "".
    """
    cfg = config or PipelineConfig.default()
    name = label or (source if isinstance(source, str) else "document")
    pipeline = ReconstructionPipeline(cfg)

    try:
        with open_document(source) as pdf:
            pages = (items for _, items in iter_document_items(pdf, cancel_event))
            return pipeline.reconstruct_pages(pages, source=name)
    except ExtractionCancelled as e:
        logger.warning("Extraction of %s cancelled: %s", name, e)
        return "", DebugBundle(source=name, cancelled=True, error=str(e))
    except Exception as e:
        logger.warning("Extraction of %s failed: %s", name, e)
        return "", DebugBundle(source=name, failed=True, error=f"{type(e).__name__}: {e}")


def extract_document_text(
    source: PdfSource,
    config: Optional[PipelineConfig] = None,
    cancel_event: Optional[threading.Event] = None,
    label: Optional[str] = None
) -> str:
    """
    Text-only entry point. "" on total failure or when nothing was found.
    """
    text, _ = run_reconstruction_pipeline(source, config, cancel_event, label)
    return text
