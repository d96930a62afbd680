"""Reconstruction of per-word time windows from recognizer timestamps."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..alignment.aligner import align_reference_to_asr
from ..models.aligned_word import DELETION, MATCH, SUBSTITUTION, AlignmentOp
from ..models.report import TimedEntry
from ..models.word import RecognizedWord, WordToken
from ..rules import (
    DELETION_LEAD_IN_SEC,
    DELETION_WINDOW_SEC,
    END_PADDING_SEC,
    MIN_WORD_DURATION,
    START_PADDING_SEC,
)
from ..utils.numbers import safe_number


def pad_word_window(start: float, end: float) -> Tuple[float, float]:
    """Widen a recognized word's span so it is usable for playback.

    The start moves back by 0.2 s (never below 0), the end forward by 0.3 s,
    and the window is at least 0.05 s long. A non-finite start becomes 0; a
    non-finite end falls back to the start.
    """
    safe_start = safe_number(start, 0.0)
    safe_end = max(safe_start + MIN_WORD_DURATION, safe_number(end, safe_start))
    padded_start = max(0.0, safe_start - START_PADDING_SEC)
    padded_end = max(padded_start + MIN_WORD_DURATION, safe_end + END_PADDING_SEC)
    return padded_start, padded_end


def reconcile(
    tokens: Sequence[WordToken],
    hypothesis_timings: Sequence[RecognizedWord],
    ops: Sequence[AlignmentOp],
) -> List[TimedEntry]:
    """Assign a time window to every reference word.

    Matched and substituted words take the padded span of the hypothesis word
    they aligned to. Omitted words get a 0.4 s window starting 0.1 s before
    the end of the previous window. Insertions produce no entry.

    End times never decrease along the result, even when the recognizer's
    timestamps are out of order.

    Args:
        tokens: Reference tokens the ops' ref indices point into
        hypothesis_timings: Recognizer words the ops' hyp indices point into
        ops: Alignment script

    Returns:
        One entry per reference word, in reading order
    """
    entries: List[TimedEntry] = []
    last_end = 0.0

    for op in ops:
        if op.op in (MATCH, SUBSTITUTION):
            meta = hypothesis_timings[op.hyp_index]
            start, end = pad_word_window(meta.start_time, meta.end_time)
            end = max(end, last_end)
        elif op.op == DELETION:
            start = max(0.0, last_end - DELETION_LEAD_IN_SEC)
            end = start + DELETION_WINDOW_SEC
        else:
            continue
        entries.append(
            TimedEntry(text=tokens[op.ref_index].original, start_time=start, end_time=end)
        )
        last_end = end

    return entries


@dataclass(frozen=True)
class WordTimeline:
    entries: Tuple[TimedEntry, ...]
    tokens: Tuple[WordToken, ...]
    ops: Tuple[AlignmentOp, ...]


def build_word_timeline(
    reference_text: Optional[str], words: Sequence[RecognizedWord]
) -> WordTimeline:
    """Highlightable timeline of the reference text for a recording.

    Has no entries or ops when the reference has no tokens or nothing
    comparable was recognized. Tokens are returned either way so callers can
    render the text unhighlighted.
    """
    result = align_reference_to_asr(reference_text, words)
    if not result.tokens or not result.hyp_words:
        return WordTimeline(entries=(), tokens=result.tokens, ops=())
    entries = reconcile(result.tokens, result.hyp_words, result.ops)
    return WordTimeline(entries=tuple(entries), tokens=result.tokens, ops=result.ops)
