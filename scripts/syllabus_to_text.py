"""
Syllabus PDF to text.

Usage:
    python scripts/syllabus_to_text.py syllabus.pdf [more.pdf ...] [--best] [--copy] [--debug]

Each file is reconstructed in reading order. Every file, even a single one,
goes through the bounded scheduler (--jobs, --timeout), so the PDF type and
size rules apply the same way. --best prints only the file most likely to
hold the course schedule.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import pyperclip

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from layout_engine import (
    ExtractionJob,
    ExtractionScheduler,
    JobPolicy,
    PipelineConfig,
    DebugBundle,
    run_reconstruction_pipeline,
)
from layout_engine.selection import SourceText, pick_best_source, prepare_for_structuring


class SyllabusPDFReader:
    """Reading-order text for syllabus PDFs, usable as a scheduler extract_fn"""

    def __init__(self, config: Optional[PipelineConfig] = None, print_debug: bool = False):
        self.config = config or PipelineConfig.default()
        self.print_debug = print_debug
        self.debug_bundles: List[DebugBundle] = []

    def __call__(self, source, cancel_event=None, label=None) -> str:
        """Extract text; "" if the PDF cannot be read"""
        text, debug = run_reconstruction_pipeline(source, self.config, cancel_event, label)
        self.debug_bundles.append(debug)
        if self.print_debug:
            print(debug.summary(), file=sys.stderr)
        return text


def copy_to_clipboard(text: str) -> bool:
    """Copy text to clipboard"""
    try:
        pyperclip.copy(text)
        return True
    except pyperclip.PyperclipException as e:
        print(f"Clipboard error: {e}", file=sys.stderr)
        return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reconstruct reading-order text from syllabus PDFs")
    parser.add_argument("inputs", nargs="+", help="PDF file(s)")
    parser.add_argument("--jobs", type=int, default=3, help="max concurrent extractions")
    parser.add_argument("--timeout", type=float, default=30.0, help="seconds allowed per PDF")
    parser.add_argument("--best", action="store_true", help="print only the best schedule source")
    parser.add_argument("--single-column", action="store_true", help="disable column detection")
    parser.add_argument("--copy", action="store_true", help="copy the result to the clipboard")
    parser.add_argument("--debug", action="store_true", help="print the engine debug summary")
    parser.add_argument("-o", "--out", help="write the result to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
    )

    paths = [p for p in args.inputs if os.path.exists(p)]
    for p in args.inputs:
        if p not in paths:
            print(f"Error: File not found: {p}", file=sys.stderr)
    if not paths:
        return 1

    config = PipelineConfig.single_column() if args.single_column else PipelineConfig.default()
    config.debug = args.debug

    policy = JobPolicy(max_concurrent=args.jobs, timeout_seconds=args.timeout)
    reader = SyllabusPDFReader(config, print_debug=args.debug)
    scheduler = ExtractionScheduler(policy, extract_fn=reader)
    jobs = [ExtractionJob(label=p, source=p) for p in paths]

    sources = []
    for outcome in scheduler.run(jobs):
        if not outcome.ok:
            print(f"{outcome.label}: syllabus text unavailable ({outcome.status})", file=sys.stderr)
        sources.append(SourceText(label=outcome.label, text=outcome.text))

    if args.best:
        best = pick_best_source(sources)
        if best is None:
            print("No source long enough to use", file=sys.stderr)
            result = ""
        else:
            print(f"Best source: {best.describe()}", file=sys.stderr)
            if prepare_for_structuring(best.text) is None:
                print(f"Warning: best source too short to process ({len(best.text)} chars)", file=sys.stderr)
            result = best.text
    else:
        result = "\n\n".join(s.text for s in sources if s.text)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as fo:
            fo.write(result)
    else:
        print(result)

    if args.copy:
        copy_to_clipboard(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
