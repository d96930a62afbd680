"""Parsing of recognizer payloads into validated RecognizedWord records."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..alignment.normalizer import normalize_word
from ..alignment.tokenizer import tokenize
from ..exceptions import InvalidInputError
from ..models.word import RecognizedWord
from ..rules import MIN_WORD_DURATION
from ..utils.logging import get_logger
from ..utils.numbers import safe_number

logger = get_logger(__name__)


def _first(entry: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = entry.get(key)
        if value is not None:
            return value
    return None


def _make_word(text: Any, start: Any, end: Any, confidence: Any = None) -> Optional[RecognizedWord]:
    if not isinstance(text, str) or not normalize_word(text):
        return None
    start_time = safe_number(start, 0.0)
    end_time = max(
        start_time + MIN_WORD_DURATION,
        safe_number(end, start_time + MIN_WORD_DURATION),
    )
    return RecognizedWord(
        text=text.strip(),
        start_time=start_time,
        end_time=end_time,
        confidence=confidence,
    )


def _word_from_entry(entry: Any) -> Optional[RecognizedWord]:
    if not isinstance(entry, Mapping):
        return None
    return _make_word(
        _first(entry, "word", "text", "value"),
        _first(entry, "start", "start_time", "startTime"),
        _first(entry, "end", "end_time", "endTime"),
        _first(entry, "confidence", "probability", "score"),
    )


def _words_from_list(entries: Any) -> List[RecognizedWord]:
    if not isinstance(entries, list):
        return []
    return [w for w in (_word_from_entry(e) for e in entries) if w is not None]


def _words_from_segments(segments: Any) -> List[RecognizedWord]:
    words: List[RecognizedWord] = []
    if not isinstance(segments, list):
        return words
    for segment in segments:
        if not isinstance(segment, Mapping):
            continue
        if isinstance(segment.get("words"), list):
            words.extend(_words_from_list(segment["words"]))
        else:
            # A segment without word timings stands in as one long word
            word = _word_from_entry(segment)
            if word is not None:
                words.append(word)
    return words


def _words_from_tokens(tokens: Any, timestamps: Any) -> List[RecognizedWord]:
    words: List[RecognizedWord] = []
    if not isinstance(tokens, list):
        return words
    if not isinstance(timestamps, list):
        timestamps = [0.0] * (len(tokens) + 1)
    for index, token in enumerate(tokens):
        start = safe_number(
            timestamps[index] if index < len(timestamps) else None,
            index * MIN_WORD_DURATION,
        )
        end = safe_number(
            timestamps[index + 1] if index + 1 < len(timestamps) else None,
            start + MIN_WORD_DURATION,
        )
        word = _make_word(token, start, end)
        if word is not None:
            words.append(word)
    return words


def _words_from_text(text: Any, fallback_duration: float) -> List[RecognizedWord]:
    if not isinstance(text, str):
        return []
    tokens = tokenize(text)
    if not tokens:
        return []
    total_duration = max(fallback_duration, MIN_WORD_DURATION * len(tokens))
    step = total_duration / len(tokens)
    return [
        RecognizedWord(text=token.original, start_time=idx * step, end_time=(idx + 1) * step)
        for idx, token in enumerate(tokens)
    ]


def parse_recognizer_output(payload: Any, fallback_duration: float = 0.0) -> List[RecognizedWord]:
    """Extract timed words from whatever shape a recognizer returned.

    Sources, first non-empty wins:
      1. "words" (or "word_timestamps"): [{word|text|value, start, end, confidence}]
      2. "segments": each segment's "words", or the segment as one word
      3. "tokens" + "timestamps": token i spans timestamps[i]..timestamps[i+1]
      4. "text": words spread evenly over fallback_duration

    Args:
        payload: Decoded recognizer response (a mapping)
        fallback_duration: Audio length in seconds, used only by source 4

    Returns:
        Words sorted by start time; entries without comparable text are dropped

    Raises:
        InvalidInputError: payload is not a mapping
    """
    if not isinstance(payload, Mapping):
        raise InvalidInputError(
            f"Recognizer output must be a mapping, got {type(payload).__name__}"
        )

    words = _words_from_list(_first(payload, "words", "word_timestamps"))
    source = "words"
    if not words:
        words = _words_from_segments(payload.get("segments"))
        source = "segments"
    if not words:
        words = _words_from_tokens(payload.get("tokens"), payload.get("timestamps"))
        source = "tokens"
    if not words:
        duration = safe_number(fallback_duration, 0.0)
        words = _words_from_text(payload.get("text"), max(0.0, duration))
        source = "text"

    logger.debug("Parsed %d recognized words from %s", len(words), source)
    return sorted(words, key=lambda w: w.start_time)
