"""Word-level and aggregate scoring for read-aloud assessment."""
from .aggregate import integrity_score, overall_score, pronunciation_score
from .word_level_scorer import score
from .word_scorer import match_score, substitution_score

__all__ = [
    "integrity_score",
    "match_score",
    "overall_score",
    "pronunciation_score",
    "score",
    "substitution_score",
]
