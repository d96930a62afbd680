"""Data model for alignment operations between reference and ASR output."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

OpType = Literal["match", "sub", "del", "ins"]

MATCH: OpType = "match"
SUBSTITUTION: OpType = "sub"
DELETION: OpType = "del"
INSERTION: OpType = "ins"


@dataclass(frozen=True)
class AlignmentOp:
    """One step of the edit script relating reference to hypothesis.

    Attributes:
        op: "match" | "sub" | "del" | "ins"
        ref_index: Reference token consumed (None for insertions)
        hyp_index: Hypothesis token consumed (None for deletions)
    """
    op: OpType
    ref_index: Optional[int] = None
    hyp_index: Optional[int] = None

    @property
    def cost(self) -> int:
        return 0 if self.op == MATCH else 1

    @classmethod
    def match(cls, ref_index: int, hyp_index: int) -> "AlignmentOp":
        return cls(MATCH, ref_index, hyp_index)

    @classmethod
    def substitution(cls, ref_index: int, hyp_index: int) -> "AlignmentOp":
        return cls(SUBSTITUTION, ref_index, hyp_index)

    @classmethod
    def deletion(cls, ref_index: int) -> "AlignmentOp":
        return cls(DELETION, ref_index, None)

    @classmethod
    def insertion(cls, hyp_index: int) -> "AlignmentOp":
        return cls(INSERTION, None, hyp_index)
