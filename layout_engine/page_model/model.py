"""
Line Model
==========
Groups a column's runs into reading lines.

Lines are keyed by the run baseline rounded to an integer. Runs straddling
a rounding boundary (10.4 vs 10.6) land on different lines; that is the
granularity of the model.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..types import TextRun, visible_runs


@dataclass
class Line:
    """
    A line of runs sharing the same rounded baseline.
    """
    key_y: int
    runs: List[TextRun] = field(default_factory=list)

    def ordered_runs(self) -> List[TextRun]:
        """Runs left-to-right; equal X falls back to text for a stable order"""
        return sorted(self.runs, key=lambda r: (r.origin_x, r.text))

    @property
    def text(self) -> str:
        """Run texts joined with no separator, trimmed"""
        return ''.join(r.text for r in self.ordered_runs()).strip()


def group_lines(runs: Iterable[TextRun]) -> List[Line]:
    """
    Group runs into lines, top of page first.

    Args:
        runs: Runs of one column (or one whole page)

    Returns:
        Non-empty lines ordered by descending baseline key
    """
    buckets: Dict[int, List[TextRun]] = defaultdict(list)
    for run in visible_runs(runs):
        buckets[run.line_key].append(run)

    lines = [Line(key_y=key, runs=members) for key, members in buckets.items()]
    # PDF Y grows upward, so the highest key is the top line
    lines.sort(key=lambda ln: ln.key_y, reverse=True)
    return [ln for ln in lines if ln.text]


def assemble_lines(runs: Iterable[TextRun]) -> str:
    """
    Render runs as newline-separated reading lines.

    Returns "" when there is nothing visible to render.
    """
    return '\n'.join(ln.text for ln in group_lines(runs))
