"""Word timing windows for playback and highlighting."""
from .reconciler import WordTimeline, build_word_timeline, pad_word_window, reconcile

__all__ = ["WordTimeline", "build_word_timeline", "pad_word_window", "reconcile"]
