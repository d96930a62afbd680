"""Word-level input models: reference tokens and recognizer output."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ..utils.numbers import safe_number


@dataclass(frozen=True)
class WordToken:
    """A word of source text.

    Attributes:
        original: Exact substring as it appeared in the text (for display)
        normalized: Comparison key (lower-cased, accents and punctuation stripped)
    """
    original: str
    normalized: str


_FIELD_ALIASES = {
    "startTime": "start_time",
    "endTime": "end_time",
}


class RecognizedWord(BaseModel):
    """One word reported by a speech recognizer.

    Times are in seconds. Unparseable or non-finite times are coerced
    (start to 0, end to start) and end is never before start. Confidence is
    clamped to [0, 1]; None means the recognizer did not report one.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    start_time: float = 0.0
    end_time: float = 0.0
    confidence: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_fields(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        values: Dict[str, Any] = {}
        for key, value in data.items():
            values[_FIELD_ALIASES.get(key, key)] = value

        text = values.get("text")
        if not isinstance(text, str):
            raise ValueError(f"text must be a string, got {type(text).__name__}")

        start = safe_number(values.get("start_time"), 0.0)
        end = safe_number(values.get("end_time"), start)
        values["start_time"] = start
        values["end_time"] = max(start, end)

        confidence = safe_number(values.get("confidence"), None)
        if confidence is not None:
            confidence = min(1.0, max(0.0, confidence))
        values["confidence"] = confidence
        return values
