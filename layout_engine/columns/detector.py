"""
Column Detector
===============
Decides whether a page reads as one column or two side-by-side columns.

This is a 1-D gap heuristic over run origins, not layout segmentation.
Pages with three or more columns fall back to single-column output.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..types import TextRun


@dataclass
class ColumnConfig:
    """Configuration for column detection (empirically tuned, keep as is)"""
    enabled: bool = True
    min_runs: int = 20            # fewer runs -> always single column
    min_x_range: float = 180.0    # narrower spread -> always single column
    min_gap_ratio: float = 0.15   # gap must exceed this share of the spread
    gap_window: Tuple[float, float] = (0.25, 0.75)  # gap position, exclusive


class ColumnDetector:
    """
    Find the gutter between two columns.

    Process:
    1. Sort run origins by X
    2. Reject small or narrow pages
    3. Find the single largest gap between neighbouring X values
    4. Accept it only if it is wide and roughly bisects the runs
    """

    def __init__(self, config: Optional[ColumnConfig] = None):
        self.config = config or ColumnConfig()

    def detect(self, runs: Sequence[TextRun]) -> Optional[float]:
        """
        Detect a two-column layout.

        Args:
            runs: All visible runs of one page

        Returns:
            Boundary X between the columns, or None for a single column
        """
        cfg = self.config
        if not cfg.enabled or len(runs) < cfg.min_runs:
            return None

        xs = sorted(r.origin_x for r in runs)
        x_range = xs[-1] - xs[0]
        if x_range <= cfg.min_x_range:
            return None

        max_gap, gap_at = self._largest_gap(xs)
        if max_gap / x_range <= cfg.min_gap_ratio:
            return None

        n = len(xs)
        lo, hi = cfg.gap_window
        if not (n * lo < gap_at < n * hi):
            # One outlier far from a single column, not a gutter
            return None

        return (xs[gap_at - 1] + xs[gap_at]) / 2

    @staticmethod
    def _largest_gap(xs: List[float]) -> Tuple[float, int]:
        """Largest gap and the index of its right-hand value; first one wins ties"""
        max_gap = 0.0
        gap_at = 0
        for i in range(1, len(xs)):
            gap = xs[i] - xs[i - 1]
            if gap > max_gap:
                max_gap = gap
                gap_at = i
        return max_gap, gap_at

    @staticmethod
    def split(runs: Sequence[TextRun], boundary: float) -> Tuple[List[TextRun], List[TextRun]]:
        """Partition runs into (left, right); runs on the boundary go left"""
        left = [r for r in runs if r.origin_x <= boundary]
        right = [r for r in runs if r.origin_x > boundary]
        return left, right


def detect_column_boundary(
    runs: Sequence[TextRun],
    config: Optional[ColumnConfig] = None
) -> Optional[float]:
    """
    Convenience function for column detection.
    """
    return ColumnDetector(config).detect(runs)
