"""Test configuration and fixtures.

Provides reusable fixtures for:
- RecognizedWord lists built from (text, start, end, confidence) tuples
- The three-word reading used across scoring scenarios
- Small WAV files for the HTTP service
"""

import wave

import pytest

from read_scoring.models import RecognizedWord


def build_words(entries):
    return [
        RecognizedWord(text=text, start_time=start, end_time=end, confidence=confidence)
        for text, start, end, confidence in entries
    ]


@pytest.fixture
def make_words():
    return build_words


@pytest.fixture
def the_cat_sat_words():
    return build_words([
        ("the", 0.0, 0.3, 0.9),
        ("cat", 0.3, 0.6, 0.9),
        ("sat", 0.6, 0.9, 0.9),
    ])


@pytest.fixture
def silent_wav(tmp_path):
    path = tmp_path / "recording.wav"
    rate = 16000
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(rate)
        wav.writeframes(b"\x00\x00" * rate)
    return path
