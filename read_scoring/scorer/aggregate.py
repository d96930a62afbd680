"""Aggregate sub-scores from per-word results."""
from __future__ import annotations

from typing import Sequence

from ..models.report import WordResult
from ..rules import FLUENCY_WEIGHT, INTEGRITY_WEIGHT, PRONUNCIATION_WEIGHT
from ..utils.numbers import round_half_up


def pronunciation_score(details: Sequence[WordResult]) -> int:
    """Mean word score over all reference words; omissions count as 0."""
    if not details:
        return 0
    return round_half_up(sum(d.score for d in details) / len(details))


def integrity_score(match_count: int, reference_count: int) -> int:
    """Share of reference words read correctly, as a percentage."""
    if reference_count <= 0:
        return 0
    return round_half_up(100 * match_count / reference_count)


def overall_score(pronunciation: int, integrity: int, fluency: int) -> int:
    return round_half_up(
        pronunciation * PRONUNCIATION_WEIGHT
        + integrity * INTEGRITY_WEIGHT
        + fluency * FLUENCY_WEIGHT
    )
