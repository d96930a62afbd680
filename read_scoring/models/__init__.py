"""Data models shared across the scoring pipeline."""
from .aligned_word import DELETION, INSERTION, MATCH, SUBSTITUTION, AlignmentOp
from .report import (
    CORRECT,
    INSERTED,
    MISPRONOUNCED,
    OMITTED,
    AlignmentSummary,
    AssessmentReport,
    TimeWindow,
    TimedEntry,
    WordResult,
)
from .word import RecognizedWord, WordToken

__all__ = [
    "AlignmentOp",
    "MATCH",
    "SUBSTITUTION",
    "DELETION",
    "INSERTION",
    "AlignmentSummary",
    "AssessmentReport",
    "TimeWindow",
    "TimedEntry",
    "WordResult",
    "CORRECT",
    "MISPRONOUNCED",
    "OMITTED",
    "INSERTED",
    "RecognizedWord",
    "WordToken",
]
