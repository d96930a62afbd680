"""Audio file helpers for the assessment service."""
from __future__ import annotations

import soundfile as sf

from read_scoring.utils.logging import get_logger

logger = get_logger("read_scoring.api")


def audio_duration_seconds(path: str, default: float = 0.0) -> float:
    """Length of an audio file in seconds.

    Containers libsndfile cannot open (browser webm, for instance) yield
    `default`; the duration only feeds the text-only transcript fallback.
    """
    try:
        info = sf.info(path)
    except (sf.LibsndfileError, RuntimeError) as e:
        logger.warning("Could not read audio duration of %s: %s", path, e)
        return default
    return float(info.duration)
