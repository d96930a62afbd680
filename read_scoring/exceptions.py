"""Custom exceptions for read_scoring."""


class ReadScoringError(Exception):
    """Base exception for read_scoring."""
    pass


class InvalidInputError(ReadScoringError, TypeError):
    """Input violates the assessment type contract."""
    pass


class RecognizerError(ReadScoringError):
    """Error obtaining or decoding recognizer output."""
    pass
