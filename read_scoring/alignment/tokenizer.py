"""Text tokenization for alignment."""
from __future__ import annotations

import re
import unicodedata
from typing import List, Optional

from ..models.word import WordToken
from .normalizer import normalize_word

# Letters/digits, with apostrophes allowed only between them ("don't", "o’clock")
WORD_PATTERN = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


def tokenize(text: Optional[str]) -> List[WordToken]:
    """Split text into word tokens carrying surface form and comparison key.

    Example: "Hello, world!" -> [WordToken("Hello", "hello"), WordToken("world", "world")]

    Args:
        text: Reference text or hypothesis transcript; None is treated as empty

    Returns:
        Tokens in reading order; tokens whose key normalizes to empty are dropped
    """
    if not text:
        return []
    tokens: List[WordToken] = []
    # Compose first so decomposed accents stay inside their word
    for match in WORD_PATTERN.finditer(unicodedata.normalize("NFC", text)):
        original = match.group(0)
        normalized = normalize_word(original)
        if normalized:
            tokens.append(WordToken(original=original, normalized=normalized))
    return tokens
