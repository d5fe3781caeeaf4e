"""
Unified Data Types for Layout Engine
====================================
All stages exchange these types. Runs are immutable; lines and columns are
rebuilt from them per page and thrown away afterwards.

Type Hierarchy:
- TextRun: One positioned string from the glyph decoder
- Item: Raw decoder item {"text", "transform"} before normalization
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence


# ============================================================
# Primitive Types
# ============================================================

# Raw glyph-provider item: {"text": str, "transform": [a, b, c, d, e, f]}
Item = Dict[str, Any]

# Index of the translation components inside a PDF transform matrix
TRANSFORM_X = 4
TRANSFORM_Y = 5


# ============================================================
# Core Data Structures
# ============================================================

@dataclass(frozen=True)
class TextRun:
    """
    A single positioned text run on a page.

    Attributes:
        text: Run text, may carry its own leading/trailing spaces
        origin_x: Baseline origin X in page units
        origin_y: Baseline origin Y in page units (increasing upward)
    """
    text: str
    origin_x: float
    origin_y: float

    @property
    def is_blank(self) -> bool:
        """True when the run carries no visible text"""
        return not self.text.strip()

    @property
    def line_key(self) -> int:
        """Integer line key: origin_y rounded half-up"""
        return round_half_up(self.origin_y)

    @classmethod
    def from_item(cls, item: Item) -> 'TextRun':
        """
        Create from a decoder item.

        Accepts "str" as an alias for "text" (pdf.js text-content items).
        Raises ValueError if the transform is missing or malformed.
        """
        text = item.get('text')
        if text is None:
            text = item.get('str', '')
        transform = item.get('transform')
        if transform is None or len(transform) < 6:
            raise ValueError(f"text run {text!r} has no usable transform: {transform!r}")
        try:
            x = float(transform[TRANSFORM_X])
            y = float(transform[TRANSFORM_Y])
        except (TypeError, ValueError) as e:
            raise ValueError(f"text run {text!r} has non-numeric origin: {transform!r}") from e
        return cls(text=str(text), origin_x=x, origin_y=y)


# ============================================================
# Helper Functions
# ============================================================

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward +infinity.

    - 10.4 -> 10
    - 10.5 -> 11
    - -2.5 -> -2

    Python's round() rounds halves to even, which would split or merge
    lines differently for baselines sitting on .5.
    """
    return int(math.floor(value + 0.5))


def visible_runs(runs: Iterable[TextRun]) -> List[TextRun]:
    """Drop runs whose text is empty after trimming"""
    return [r for r in runs if not r.is_blank]


def runs_from_items(items: Sequence[Item]) -> List[TextRun]:
    """
    Normalize one page of decoder items into visible TextRuns.

    Raises ValueError on the first malformed item; a page that cannot be
    read fully is not read at all.
    """
    runs = [TextRun.from_item(item) for item in items]
    return visible_runs(runs)
