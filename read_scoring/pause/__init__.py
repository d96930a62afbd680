"""Pause detection and fluency scoring."""
from .pause_counter import count_pauses, fluency_score, inter_word_gaps

__all__ = ["count_pauses", "fluency_score", "inter_word_gaps"]
