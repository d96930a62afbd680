"""Pause detection over the raw recognizer timeline."""
from __future__ import annotations

from typing import List, Sequence

from ..models.word import RecognizedWord
from ..rules import MAX_SCORE, PAUSE_GAP_THRESHOLD_SEC, PAUSE_PENALTY


def inter_word_gaps(words: Sequence[RecognizedWord]) -> List[float]:
    """Silence between each word and the next, in recognizer order.

    Overlapping timestamps give negative gaps; they are kept as-is.
    """
    return [
        words[i].start_time - words[i - 1].end_time
        for i in range(1, len(words))
    ]


def count_pauses(
    words: Sequence[RecognizedWord], threshold: float = PAUSE_GAP_THRESHOLD_SEC
) -> int:
    """Count gaps strictly longer than threshold between consecutive words."""
    return sum(1 for gap in inter_word_gaps(words) if gap > threshold)


def fluency_score(pause_count: int, penalty: int = PAUSE_PENALTY) -> int:
    """100 minus a fixed penalty per pause, floored at 0."""
    return max(0, MAX_SCORE - penalty * pause_count)
