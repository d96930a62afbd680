"""Alignment and scoring engine for read-aloud pronunciation assessment."""
from .exceptions import InvalidInputError, ReadScoringError, RecognizerError
from .models import AssessmentReport, RecognizedWord, WordResult, WordToken
from .pipeline import assess

__all__ = [
    "AssessmentReport",
    "InvalidInputError",
    "ReadScoringError",
    "RecognizedWord",
    "RecognizerError",
    "WordResult",
    "WordToken",
    "assess",
]
