"""
Yield Diagnostics
=================
Flags documents whose extracted text is implausibly short for their page
count. A low yield usually means a scanned PDF with no text layer.

The flag is a triage signal for operators. It is logged, never raised, and
the text is returned untouched either way.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class YieldConfig:
    """Configuration for low-yield detection"""
    min_pages: int = 2     # only documents with more pages are judged
    min_chars: int = 300   # fewer characters than this is a low yield


@dataclass
class YieldReport:
    """Result of a yield check"""
    page_count: int
    char_count: int
    low_yield: bool = False

    def summary(self) -> str:
        state = "LOW" if self.low_yield else "ok"
        return f"yield {state}: {self.char_count} chars over {self.page_count} pages"


def check_yield(
    text: str,
    page_count: int,
    config: Optional[YieldConfig] = None,
    source: str = "document"
) -> YieldReport:
    """
    Check extracted text volume against page count.

    Args:
        text: Final document text
        page_count: Total pages in the document
        config: Thresholds (defaults: >2 pages and <300 chars)
        source: Label used in the warning

    Returns:
        YieldReport with low_yield set when the text is implausibly short
    """
    cfg = config or YieldConfig()
    char_count = len(text or "")
    low = page_count > cfg.min_pages and char_count < cfg.min_chars

    if low:
        logger.warning(
            "Low text yield for %s: %d chars over %d pages (likely scanned / no text layer)",
            source, char_count, page_count,
        )

    return YieldReport(page_count=page_count, char_count=char_count, low_yield=low)
