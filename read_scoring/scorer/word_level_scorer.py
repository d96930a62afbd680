"""Word-level scoring of an aligned reading."""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..alignment.normalizer import normalize_word
from ..models.aligned_word import DELETION, INSERTION, MATCH, SUBSTITUTION, AlignmentOp
from ..models.report import (
    CORRECT,
    INSERTED,
    MISPRONOUNCED,
    OMITTED,
    AlignmentSummary,
    AssessmentReport,
    TimeWindow,
    WordResult,
)
from ..models.word import RecognizedWord, WordToken
from ..pause.pause_counter import count_pauses, fluency_score
from ..report_generator import build_report, empty_report
from ..timing.reconciler import pad_word_window, reconcile
from ..utils.logging import get_logger
from .aggregate import integrity_score, overall_score, pronunciation_score
from .word_scorer import match_score, substitution_score

logger = get_logger(__name__)


def score(
    reference_tokens: Sequence[WordToken],
    recognized_words: Sequence[RecognizedWord],
    ops: Sequence[AlignmentOp],
    timeline: Optional[Sequence[RecognizedWord]] = None,
) -> AssessmentReport:
    """Turn an alignment into word results and sub-scores.

    Status per reference word:
      - "correct": matched; scored from recognizer confidence
      - "mispronounced": substituted; scored 40-60 by similarity
      - "omitted": deleted; scored 0
    Inserted words are reported apart from `details` and only count through
    fluency (their pauses are part of the timeline).

    Args:
        reference_tokens: Tokens of the reference text
        recognized_words: Hypothesis words the ops' hyp indices point into
        ops: Alignment script between the two
        timeline: Raw recognizer output used for pause counting; defaults to
            recognized_words

    Returns:
        AssessmentReport; all zeros with no details for an empty reference
    """
    if not reference_tokens:
        return empty_report()
    if timeline is None:
        timeline = recognized_words

    windows = iter(reconcile(reference_tokens, recognized_words, ops))
    details: List[WordResult] = []
    inserted: List[WordResult] = []
    matches = substitutions = deletions = insertions = 0

    for op in ops:
        if op.op == INSERTION:
            insertions += 1
            extra = recognized_words[op.hyp_index]
            start, end = pad_word_window(extra.start_time, extra.end_time)
            inserted.append(
                WordResult(word=extra.text, status=INSERTED, score=0, time_window=TimeWindow(start, end))
            )
            continue

        entry = next(windows)
        window = TimeWindow(entry.start_time, entry.end_time)
        token = reference_tokens[op.ref_index]

        if op.op == MATCH:
            matches += 1
            word_score = match_score(recognized_words[op.hyp_index].confidence)
            details.append(WordResult(token.original, CORRECT, word_score, window))
        elif op.op == SUBSTITUTION:
            substitutions += 1
            spoken = normalize_word(recognized_words[op.hyp_index].text)
            word_score = substitution_score(token.normalized, spoken)
            details.append(WordResult(token.original, MISPRONOUNCED, word_score, window))
        elif op.op == DELETION:
            deletions += 1
            details.append(WordResult(token.original, OMITTED, 0, window))

    n = len(reference_tokens)
    pauses = count_pauses(timeline)
    pronunciation = pronunciation_score(details)
    integrity = integrity_score(matches, n)
    fluency = fluency_score(pauses)
    overall = overall_score(pronunciation, integrity, fluency)

    summary = AlignmentSummary(
        matches=matches,
        substitutions=substitutions,
        deletions=deletions,
        insertions=insertions,
        pause_count=pauses,
        word_error_rate=(substitutions + deletions + insertions) / n,
    )
    logger.debug(
        "Scored %d reference words: match=%d sub=%d del=%d ins=%d pauses=%d overall=%d",
        n, matches, substitutions, deletions, insertions, pauses, overall,
    )
    return build_report(
        details=details,
        inserted=inserted,
        pronunciation=pronunciation,
        integrity=integrity,
        fluency=fluency,
        overall=overall,
        summary=summary,
    )
