"""Result models for an assessment."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Tuple

WordStatus = Literal["correct", "mispronounced", "omitted", "inserted"]

CORRECT: WordStatus = "correct"
MISPRONOUNCED: WordStatus = "mispronounced"
OMITTED: WordStatus = "omitted"
INSERTED: WordStatus = "inserted"


@dataclass(frozen=True)
class TimeWindow:
    start: float
    end: float

    def to_dict(self) -> Dict[str, float]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class TimedEntry:
    """A reference word placed on the playback timeline."""
    text: str
    start_time: float
    end_time: float


@dataclass(frozen=True)
class WordResult:
    word: str
    status: WordStatus
    score: int
    time_window: Optional[TimeWindow] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"word": self.word, "status": self.status, "score": self.score}
        if self.time_window is not None:
            out["timeWindow"] = self.time_window.to_dict()
        return out


@dataclass(frozen=True)
class AlignmentSummary:
    """Edit-script statistics behind a report."""
    matches: int = 0
    substitutions: int = 0
    deletions: int = 0
    insertions: int = 0
    pause_count: int = 0
    word_error_rate: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matches": self.matches,
            "substitutions": self.substitutions,
            "deletions": self.deletions,
            "insertions": self.insertions,
            "pauseCount": self.pause_count,
            "wordErrorRate": self.word_error_rate,
        }


@dataclass(frozen=True)
class AssessmentReport:
    """Scores for one recording against its reference text.

    `details` holds one entry per reference word in reading order. Extra
    spoken words are kept apart in `inserted`; they only affect fluency.
    """
    overall_score: int
    fluency_score: int
    integrity_score: int
    pronunciation_score: int
    details: Tuple[WordResult, ...] = ()
    inserted: Tuple[WordResult, ...] = ()
    summary: AlignmentSummary = field(default_factory=AlignmentSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "fluencyScore": self.fluency_score,
            "integrityScore": self.integrity_score,
            "pronunciationScore": self.pronunciation_score,
            "details": [d.to_dict() for d in self.details],
            "inserted": [w.to_dict() for w in self.inserted],
            "summary": self.summary.to_dict(),
        }
