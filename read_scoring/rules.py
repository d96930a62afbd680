"""Scoring and timing constants for read-aloud assessment."""
from __future__ import annotations

# Tokens whose edit distance divided by their max length is at or below this
# ratio are aligned as the same word (ASR misrecognition tolerance)
ROUGH_MATCH_MAX_RATIO = 0.45

# Word window padding applied around recognizer timestamps (seconds)
START_PADDING_SEC = 0.2
END_PADDING_SEC = 0.3
MIN_WORD_DURATION = 0.05

# Synthetic window for reference words that were never spoken (seconds)
DELETION_LEAD_IN_SEC = 0.1
DELETION_WINDOW_SEC = 0.4

# Confidence assumed when the recognizer reports none
DEFAULT_CONFIDENCE = 0.95

# Substitutions score inside [SUBSTITUTION_BASE_SCORE, BASE + SPAN],
# scaled by character similarity of the two words
SUBSTITUTION_BASE_SCORE = 40
SUBSTITUTION_SCORE_SPAN = 20

# Fluency: a gap longer than this between consecutive recognized words is a pause
PAUSE_GAP_THRESHOLD_SEC = 0.5
PAUSE_PENALTY = 5

# Overall score weights
PRONUNCIATION_WEIGHT = 0.5
INTEGRITY_WEIGHT = 0.3
FLUENCY_WEIGHT = 0.2

MAX_SCORE = 100
