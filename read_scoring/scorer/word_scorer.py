"""Per-word scores for aligned reference words."""
from __future__ import annotations

from typing import Optional

from ..alignment.edit_distance import string_similarity
from ..rules import (
    DEFAULT_CONFIDENCE,
    MAX_SCORE,
    SUBSTITUTION_BASE_SCORE,
    SUBSTITUTION_SCORE_SPAN,
)
from ..utils.numbers import round_half_up


def match_score(confidence: Optional[float], default: float = DEFAULT_CONFIDENCE) -> int:
    """Score a correctly read word from the recognizer's confidence."""
    if confidence is None:
        confidence = default
    return min(MAX_SCORE, max(0, round_half_up(confidence * 100)))


def substitution_score(reference: str, spoken: str) -> int:
    """Score a misread word between 40 and 60 by how close the spoken word was.

    Similarity is character-level (1 - edit distance / longer length) over
    the normalized forms.
    """
    similarity = string_similarity(reference, spoken)
    return SUBSTITUTION_BASE_SCORE + round_half_up(similarity * SUBSTITUTION_SCORE_SPAN)
