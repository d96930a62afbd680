"""Alignment orchestration between reference text and recognizer output."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..models.aligned_word import AlignmentOp
from ..models.word import RecognizedWord, WordToken
from .edit_distance import align_sequences
from .normalizer import normalize_word
from .tokenizer import tokenize


@dataclass(frozen=True)
class AlignmentResult:
    """Reference tokens, comparable hypothesis words and the script between them."""
    tokens: Tuple[WordToken, ...]
    hyp_tokens: Tuple[str, ...]
    hyp_words: Tuple[RecognizedWord, ...]
    ops: Tuple[AlignmentOp, ...]


def tokenize_asr(words: Sequence[RecognizedWord]) -> Tuple[List[str], List[RecognizedWord]]:
    """Normalize recognizer words for alignment.

    Returns:
        - hyp_tokens: Normalized keys, one per kept word
        - hyp_words: The recognizer entries the keys came from
    Words normalizing to empty (bare punctuation, noise markers) are dropped.
    """
    hyp_tokens: List[str] = []
    hyp_words: List[RecognizedWord] = []
    for w in words:
        normalized = normalize_word(w.text)
        if normalized:
            hyp_tokens.append(normalized)
            hyp_words.append(w)
    return hyp_tokens, hyp_words


def align_reference_to_asr(
    reference_text: Optional[str], words: Sequence[RecognizedWord]
) -> AlignmentResult:
    """Tokenize both sides and align them.

    Args:
        reference_text: The text the speaker was asked to read
        words: Recognizer output with timestamps

    Returns:
        AlignmentResult whose op indices refer to `tokens` and `hyp_words`
    """
    tokens = tokenize(reference_text)
    hyp_tokens, hyp_words = tokenize_asr(words)
    ops = align_sequences([t.normalized for t in tokens], hyp_tokens)
    return AlignmentResult(
        tokens=tuple(tokens),
        hyp_tokens=tuple(hyp_tokens),
        hyp_words=tuple(hyp_words),
        ops=tuple(ops),
    )
