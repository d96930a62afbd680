"""Token normalization utilities for alignment."""
from __future__ import annotations

import re
import unicodedata

# Quote, bracket and sentence punctuation removed from comparison keys
STRIP_PUNCTUATION = re.compile(r"[“”\"()\[\],.:;!?]")


def normalize_word(word: str) -> str:
    """Normalize a word into its comparison key.

    Decomposes with NFKD and drops combining marks so accented and plain
    letters compare equal, removes quotes/brackets/punctuation, folds the
    typographic apostrophe to "'", and lower-cases.

    Example: "Café," -> "cafe"; "Don’t" -> "don't"

    Args:
        word: Raw word as it appeared in text or recognizer output

    Returns:
        Normalized key, possibly empty when the word had no letters or digits
    """
    if not word:
        return ""
    decomposed = unicodedata.normalize("NFKD", word)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    stripped = STRIP_PUNCTUATION.sub("", stripped)
    return stripped.replace("’", "'").lower().strip()
