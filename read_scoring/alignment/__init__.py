"""Alignment utilities for matching reference text to recognizer output."""
from .aligner import AlignmentResult, align_reference_to_asr, tokenize_asr
from .edit_distance import (
    align_sequences,
    alignment_cost,
    build_cost_table,
    levenshtein_distance,
    string_similarity,
    tokens_roughly_match,
)
from .normalizer import normalize_word
from .tokenizer import tokenize

# Contract name for the token aligner
align = align_sequences

__all__ = [
    "AlignmentResult",
    "align",
    "align_reference_to_asr",
    "align_sequences",
    "alignment_cost",
    "build_cost_table",
    "levenshtein_distance",
    "normalize_word",
    "string_similarity",
    "tokenize",
    "tokenize_asr",
    "tokens_roughly_match",
]
