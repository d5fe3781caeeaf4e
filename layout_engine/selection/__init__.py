"""
Source Selection Module
=======================
Schedule-density scoring of candidate syllabus texts.
"""

from .scorer import (
    ScheduleScorer,
    SelectionConfig,
    SourceText,
    ScoredSource,
    schedule_score,
    pick_best_source,
    prepare_for_structuring,
    preview,
)

__all__ = [
    'ScheduleScorer', 'SelectionConfig', 'SourceText', 'ScoredSource',
    'schedule_score', 'pick_best_source', 'prepare_for_structuring', 'preview',
]
