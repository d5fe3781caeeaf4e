"""
Syllabus Layout Engine
======================
Reading-order text reconstruction for syllabus PDFs.

Architecture:
- page_model: Line grouping by rounded baseline
- columns: Single- vs two-column detection by gap analysis
- diagnostics: Low-yield (likely scanned) detection
- selection: Schedule-density scoring of candidate sources
- glyphs: pdfplumber adapter producing positioned text runs
- jobs: Bounded, deadline-limited batch extraction

Usage:
    from layout_engine import extract_document_text
    text = extract_document_text("syllabus.pdf")
"""

from .types import TextRun, runs_from_items, round_half_up
from .pipeline import (
    ReconstructionPipeline,
    PipelineConfig,
    DebugBundle,
    run_reconstruction_pipeline,
    extract_document_text,
)
from .jobs import ExtractionScheduler, ExtractionJob, JobOutcome, JobPolicy

__all__ = [
    'TextRun',
    'runs_from_items',
    'round_half_up',
    'ReconstructionPipeline',
    'PipelineConfig',
    'DebugBundle',
    'run_reconstruction_pipeline',
    'extract_document_text',
    'ExtractionScheduler',
    'ExtractionJob',
    'JobOutcome',
    'JobPolicy',
]

__version__ = '1.0.0'
