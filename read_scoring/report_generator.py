"""Assembly of the final assessment report."""
from __future__ import annotations

from typing import Iterable, Optional

from .models.report import AlignmentSummary, AssessmentReport, WordResult
from .rules import MAX_SCORE


def _clamp_score(value: int) -> int:
    return max(0, min(MAX_SCORE, int(value)))


def build_report(
    details: Iterable[WordResult],
    pronunciation: int,
    integrity: int,
    fluency: int,
    overall: int,
    inserted: Iterable[WordResult] = (),
    summary: Optional[AlignmentSummary] = None,
) -> AssessmentReport:
    """Package scores and word results into an immutable report.

    Scores are clamped to [0, 100].
    """
    return AssessmentReport(
        overall_score=_clamp_score(overall),
        fluency_score=_clamp_score(fluency),
        integrity_score=_clamp_score(integrity),
        pronunciation_score=_clamp_score(pronunciation),
        details=tuple(details),
        inserted=tuple(inserted),
        summary=summary if summary is not None else AlignmentSummary(),
    )


def empty_report() -> AssessmentReport:
    """Report for a reference with nothing to read: all zeros, no details."""
    return build_report(details=(), pronunciation=0, integrity=0, fluency=0, overall=0)
