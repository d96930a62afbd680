"""Read-aloud assessment entry point."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from .alignment.aligner import align_reference_to_asr
from .exceptions import InvalidInputError
from .models.report import AssessmentReport
from .models.word import RecognizedWord
from .report_generator import empty_report
from .scorer.word_level_scorer import score
from .utils.logging import get_logger

logger = get_logger(__name__)


def coerce_recognized_words(recognized_words: Any) -> List[RecognizedWord]:
    """Validate recognizer output against the RecognizedWord contract.

    Accepts a list or tuple of RecognizedWord instances or mappings with
    text / startTime / endTime / confidence (snake_case also accepted).

    Raises:
        InvalidInputError: not a list/tuple, or an entry cannot be a word
    """
    if not isinstance(recognized_words, (list, tuple)):
        raise InvalidInputError(
            f"recognized_words must be a list, got {type(recognized_words).__name__}"
        )
    words: List[RecognizedWord] = []
    for index, entry in enumerate(recognized_words):
        if isinstance(entry, RecognizedWord):
            words.append(entry)
            continue
        if not isinstance(entry, Mapping):
            raise InvalidInputError(
                f"recognized_words[{index}] must be a mapping, got {type(entry).__name__}"
            )
        try:
            words.append(RecognizedWord.model_validate(dict(entry)))
        except ValidationError as e:
            raise InvalidInputError(f"recognized_words[{index}] is invalid: {e}") from e
    return words


def assess(
    reference_text: Optional[str], recognized_words: Sequence[Any]
) -> AssessmentReport:
    """Assess a recording's transcript against the text that was to be read.

    Pipeline flow:
    1. Validate recognizer words
    2. Tokenize the reference and align it with the recognized words
    3. Reconcile word time windows and score each reference word
    4. Aggregate sub-scores into the report

    Args:
        reference_text: Target text; None or blank gives an all-zero report
        recognized_words: Recognizer output with timestamps and confidence

    Returns:
        Immutable AssessmentReport

    Raises:
        InvalidInputError: reference_text is not a string, or
            recognized_words violates the RecognizedWord contract
    """
    if reference_text is not None and not isinstance(reference_text, str):
        raise InvalidInputError(
            f"reference_text must be a string, got {type(reference_text).__name__}"
        )
    words = coerce_recognized_words(recognized_words)

    if not reference_text or not reference_text.strip():
        logger.debug("Empty reference text, returning empty report")
        return empty_report()

    aligned = align_reference_to_asr(reference_text, words)
    if not aligned.tokens:
        logger.debug("Reference text has no words, returning empty report")
        return empty_report()

    return score(aligned.tokens, aligned.hyp_words, aligned.ops, timeline=words)
