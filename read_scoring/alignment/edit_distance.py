"""Edit distance alignment algorithm for sequence matching."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from rapidfuzz.distance import Levenshtein

from ..models.aligned_word import AlignmentOp
from ..rules import ROUGH_MATCH_MAX_RATIO


def levenshtein_distance(a: str, b: str) -> int:
    """Character-level edit distance between two strings."""
    return Levenshtein.distance(a, b)


def string_similarity(a: str, b: str) -> float:
    """1 - edit distance / longer length; 1.0 for two empty strings."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / max_len


def tokens_roughly_match(left: str, right: str) -> bool:
    """True when two normalized tokens should align as the same word.

    Identical tokens match; otherwise both must be non-empty and their edit
    distance relative to the longer token must not exceed 0.45.
    """
    if left == right:
        return True
    if not left or not right:
        return False
    distance = levenshtein_distance(left, right)
    return distance / max(len(left), len(right)) <= ROUGH_MATCH_MAX_RATIO


def build_cost_table(ref: Sequence[str], hyp: Sequence[str]) -> List[List[int]]:
    """Fill the (n+1) x (m+1) edit-distance table using rough-match costs."""
    n, m = len(ref), len(hyp)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = i
    for j in range(m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = 0 if tokens_roughly_match(ref[i - 1], hyp[j - 1]) else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )
    return dp


def align_sequences(ref: Sequence[str], hyp: Sequence[str]) -> List[AlignmentOp]:
    """Minimum-cost edit script between reference and hypothesis keys.

    match -> same (or roughly same) word
    sub   -> different word spoken in its place
    del   -> reference word not spoken
    ins   -> extra spoken word

    On ties the backtrace prefers a deletion, then an insertion, then the
    diagonal step; this fixes which of several equal-cost scripts is chosen.

    Args:
        ref: Normalized reference tokens
        hyp: Normalized hypothesis tokens

    Returns:
        Operations in left-to-right reference/hypothesis order
    """
    dp = build_cost_table(ref, hyp)

    ops: List[AlignmentOp] = []
    i, j = len(ref), len(hyp)
    while i > 0 or j > 0:
        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            ops.append(AlignmentOp.deletion(i - 1))
            i -= 1
            continue
        if j > 0 and dp[i][j] == dp[i][j - 1] + 1:
            ops.append(AlignmentOp.insertion(j - 1))
            j -= 1
            continue
        if tokens_roughly_match(ref[i - 1], hyp[j - 1]):
            ops.append(AlignmentOp.match(i - 1, j - 1))
        else:
            ops.append(AlignmentOp.substitution(i - 1, j - 1))
        i -= 1
        j -= 1
    ops.reverse()
    return ops


def alignment_cost(ops: Iterable[AlignmentOp]) -> int:
    """Total edit cost of a script (matches weigh 0, everything else 1)."""
    return sum(op.cost for op in ops)
