"""
Source Selection
================
Picks the syllabus source most likely to hold a week-by-week schedule.

A course can offer several texts (the HTML syllabus body, one or more
reconstructed PDFs). Length alone is a poor proxy: a long policy page
should lose to a short schedule table, so texts are scored by schedule
marker density.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass
class SelectionConfig:
    """Configuration for source selection and structuring limits"""
    min_score_chars: int = 50            # shorter texts score 0
    min_candidate_chars: int = 100       # shorter sources are not candidates
    min_structuring_chars: int = 500     # shorter text is "too short to process"
    max_structuring_chars: int = 12000   # enough for a full semester
    preview_chars: int = 10000           # stored raw-text preview
    density_unit: int = 500              # scores are per this many chars


@dataclass
class SourceText:
    """One candidate source of syllabus text"""
    label: str
    text: str


@dataclass
class ScoredSource:
    """A candidate with its schedule score"""
    label: str
    text: str
    score: float

    def describe(self) -> str:
        return f"{self.label}(score={self.score:.3f},{len(self.text)}c)"


class ScheduleScorer:
    """
    Score text for schedule-content density.

    Signals (weight):
    - week/lecture/session markers followed by a number (4)
    - dates such as "Jan 13" or "1/13" (2)
    - topic cues such as "Chapter", "Readings:" (2)
    - policy language such as "attendance", "office hours" (-1)
    """

    WEEK_PATTERN = re.compile(r'\b(week|lecture|class|session|module)\s*\d+')
    DATE_PATTERN = re.compile(
        r'\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\s+\d{1,2}'
        r'|\b\d{1,2}/\d{1,2}\b'
    )
    TOPIC_PATTERN = re.compile(r'\b(introduction|overview|chapter|ch\.\s*\d|topics?:|readings?:)')
    POLICY_PATTERN = re.compile(
        r'\b(attendance|grading|plagiarism|academic\s+integrity|office\s+hours'
        r'|late\s+(work|penalty)|points?\s+possible)'
    )

    WEIGHTS = [
        (WEEK_PATTERN, 4),
        (DATE_PATTERN, 2),
        (TOPIC_PATTERN, 2),
        (POLICY_PATTERN, -1),
    ]

    def __init__(self, config: Optional[SelectionConfig] = None):
        self.config = config or SelectionConfig()

    def score(self, text: str) -> float:
        if not text or len(text) < self.config.min_score_chars:
            return 0.0
        lowered = text.lower()
        raw = sum(weight * sum(1 for _ in pattern.finditer(lowered))
                  for pattern, weight in self.WEIGHTS)
        # Density, not absolute count
        return raw / (len(text) / self.config.density_unit)

    def pick(self, sources: Iterable[SourceText]) -> Optional[ScoredSource]:
        """
        Pick the best candidate.

        Highest score wins; ties go to the longer text. Sources shorter than
        min_candidate_chars (after trimming) are ignored.
        """
        candidates: List[ScoredSource] = []
        for src in sources:
            text = (src.text or "").strip()
            if len(text) < self.config.min_candidate_chars:
                continue
            candidates.append(ScoredSource(label=src.label, text=text, score=self.score(text)))

        if not candidates:
            return None
        candidates.sort(key=lambda c: (-c.score, -len(c.text)))
        return candidates[0]


def schedule_score(text: str) -> float:
    """Convenience function for scoring one text"""
    return ScheduleScorer().score(text)


def pick_best_source(
    sources: Iterable[SourceText],
    config: Optional[SelectionConfig] = None
) -> Optional[ScoredSource]:
    """Convenience function for picking the best source"""
    return ScheduleScorer(config).pick(sources)


def prepare_for_structuring(text: str, config: Optional[SelectionConfig] = None) -> Optional[str]:
    """
    Gate text before the text-to-structure service.

    Returns None when the text is too short to process, otherwise the text
    truncated to the structuring limit.
    """
    cfg = config or SelectionConfig()
    text = (text or "").strip()
    if len(text) < cfg.min_structuring_chars:
        return None
    return text[:cfg.max_structuring_chars]


def preview(text: str, config: Optional[SelectionConfig] = None) -> str:
    """Raw-text preview kept alongside an imported source"""
    cfg = config or SelectionConfig()
    return (text or "")[:cfg.preview_chars]
