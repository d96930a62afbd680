"""Speech recognizer clients handed to callers of the assessment pipeline."""
from __future__ import annotations

import os
from typing import List, Optional, Protocol, Sequence

import requests

from ..exceptions import RecognizerError
from ..models.word import RecognizedWord
from ..utils.logging import get_logger
from .parser import parse_recognizer_output

logger = get_logger(__name__)

ASR_SERVICE_URL = "http://localhost:8000/asr"


class Recognizer(Protocol):
    """Anything that turns an audio file into timed words."""

    def transcribe(self, audio_path: str, fallback_duration: float = 0.0) -> List[RecognizedWord]:
        ...


class HttpRecognizer:
    """Client for a remote ASR service.

    The service receives the audio as a multipart "file" upload and answers
    with JSON in any shape `parse_recognizer_output` understands, e.g.
    {"text": "...", "word_timestamps": [{"word": "...", "start": 0.0, "end": 0.4}]}.
    """

    def __init__(self, url: str = ASR_SERVICE_URL, timeout: float = 60.0):
        self.url = url
        self.timeout = timeout

    def transcribe(self, audio_path: str, fallback_duration: float = 0.0) -> List[RecognizedWord]:
        if not os.path.exists(audio_path):
            raise RecognizerError(f"Audio file not found: {audio_path}")

        logger.info("Sending %s to ASR service at %s", audio_path, self.url)
        try:
            with open(audio_path, "rb") as f:
                response = requests.post(self.url, files={"file": f}, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error("ASR service error: %s", e)
            raise RecognizerError(f"ASR service request failed: {e}") from e
        except ValueError as e:
            raise RecognizerError(f"ASR service returned invalid JSON: {e}") from e

        return parse_recognizer_output(payload, fallback_duration=fallback_duration)


class StaticRecognizer:
    """Recognizer returning a fixed transcript, for hosts that already have one."""

    def __init__(self, words: Sequence[RecognizedWord], audio_required: bool = False):
        self.words = list(words)
        self.audio_required = audio_required

    def transcribe(self, audio_path: str, fallback_duration: float = 0.0) -> List[RecognizedWord]:
        if self.audio_required and not os.path.exists(audio_path):
            raise RecognizerError(f"Audio file not found: {audio_path}")
        return list(self.words)


def default_recognizer(url: Optional[str] = None, timeout: Optional[float] = None) -> HttpRecognizer:
    """HttpRecognizer configured from ASR_SERVICE_URL / ASR_TIMEOUT."""
    if url is None:
        url = os.getenv("ASR_SERVICE_URL", ASR_SERVICE_URL)
    if timeout is None:
        try:
            timeout = float(os.getenv("ASR_TIMEOUT", "60"))
        except ValueError as e:
            raise RecognizerError(
                f"ASR_TIMEOUT must be a number, got {os.getenv('ASR_TIMEOUT')!r}"
            ) from e
    return HttpRecognizer(url=url, timeout=timeout)
