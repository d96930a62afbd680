"""Recognizer output ingestion and recognizer clients."""
from .parser import parse_recognizer_output
from .recognizer import HttpRecognizer, Recognizer, StaticRecognizer, default_recognizer

__all__ = [
    "HttpRecognizer",
    "Recognizer",
    "StaticRecognizer",
    "default_recognizer",
    "parse_recognizer_output",
]
