import random

import pytest

from read_scoring.alignment import (
    align,
    alignment_cost,
    build_cost_table,
    levenshtein_distance,
    string_similarity,
    tokens_roughly_match,
)
from read_scoring.models import AlignmentOp, DELETION, INSERTION, MATCH, SUBSTITUTION

ALPHABET20 = "abcdefghijklmnopqrst"


def test_levenshtein_and_similarity():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert string_similarity("book", "back") == pytest.approx(0.5)
    assert string_similarity("", "") == 1.0


def test_rough_match_threshold_boundary():
    # cat/kat: 1 / 3 = 0.33 <= 0.45
    assert round(levenshtein_distance("cat", "kat") / 3, 2) == 0.33
    assert tokens_roughly_match("cat", "kat")
    # 9 / 20 = 0.45 exactly still matches, 10 / 20 does not
    nine_off = "XXXXXXXXX" + ALPHABET20[9:]
    ten_off = "XXXXXXXXXX" + ALPHABET20[10:]
    assert tokens_roughly_match(ALPHABET20, nine_off)
    assert not tokens_roughly_match(ALPHABET20, ten_off)
    assert not tokens_roughly_match("book", "back")


def test_rough_match_empty_tokens():
    assert tokens_roughly_match("", "")
    assert not tokens_roughly_match("", "a")


def test_identical_sequences_all_match():
    ops = align(["the", "cat", "sat"], ["the", "cat", "sat"])
    assert ops == [AlignmentOp.match(0, 0), AlignmentOp.match(1, 1), AlignmentOp.match(2, 2)]


def test_near_miss_aligns_as_match():
    assert align(["cat"], ["kat"]) == [AlignmentOp.match(0, 0)]
    assert align(["colour"], ["color"]) == [AlignmentOp.match(0, 0)]


def test_distant_word_is_substitution():
    assert align(["cat"], ["dog"]) == [AlignmentOp.substitution(0, 0)]


def test_missing_middle_word_is_deletion():
    ops = align(["the", "dog", "sat"], ["the", "sat"])
    assert ops == [AlignmentOp.match(0, 0), AlignmentOp.deletion(1), AlignmentOp.match(2, 1)]


def test_deletion_first_tiebreak_with_rough_match():
    # "cat" roughly matches "sat", so the trailing word is the one left over
    ops = align(["the", "cat", "sat"], ["the", "sat"])
    assert ops == [AlignmentOp.match(0, 0), AlignmentOp.match(1, 1), AlignmentOp.deletion(2)]


def test_tiebreak_prefers_trailing_deletion():
    # [sub, del] and [del, sub] cost the same; backtrace takes deletion first
    ops = align(["a", "b"], ["c"])
    assert ops == [AlignmentOp.substitution(0, 0), AlignmentOp.deletion(1)]


def test_tiebreak_mixed_script():
    ops = align(["a", "b"], ["b", "c"])
    assert ops == [AlignmentOp.deletion(0), AlignmentOp.match(1, 0), AlignmentOp.insertion(1)]


def test_extra_word_is_insertion():
    ops = align(["the", "cat"], ["the", "big", "cat"])
    assert [op.op for op in ops] == [MATCH, INSERTION, MATCH]
    assert ops[1] == AlignmentOp.insertion(1)


def test_empty_sides():
    assert align([], []) == []
    assert align(["a"], []) == [AlignmentOp.deletion(0)]
    assert align([], ["a", "b"]) == [AlignmentOp.insertion(0), AlignmentOp.insertion(1)]


def test_cost_table_base_cases():
    dp = build_cost_table(["a", "b"], ["x", "y", "z"])
    assert [row[0] for row in dp] == [0, 1, 2]
    assert dp[0] == [0, 1, 2, 3]


VOCAB = ["a", "the", "cat", "cot", "kat", "dog", "sat", "mat", "reading", "leading"]


def _random_case(rng):
    ref = [rng.choice(VOCAB) for _ in range(rng.randint(0, 8))]
    hyp = [rng.choice(VOCAB) for _ in range(rng.randint(0, 8))]
    return ref, hyp


def test_alignment_covers_every_index_once():
    rng = random.Random(7)
    for _ in range(300):
        ref, hyp = _random_case(rng)
        ops = align(ref, hyp)
        ref_indices = [op.ref_index for op in ops if op.op in (MATCH, SUBSTITUTION, DELETION)]
        hyp_indices = [op.hyp_index for op in ops if op.op in (MATCH, SUBSTITUTION, INSERTION)]
        assert ref_indices == list(range(len(ref)))
        assert hyp_indices == list(range(len(hyp)))


def test_alignment_cost_equals_table_optimum():
    rng = random.Random(11)
    for _ in range(300):
        ref, hyp = _random_case(rng)
        ops = align(ref, hyp)
        assert alignment_cost(ops) == build_cost_table(ref, hyp)[len(ref)][len(hyp)]


def test_match_and_substitution_follow_rough_match():
    rng = random.Random(3)
    for _ in range(100):
        ref, hyp = _random_case(rng)
        for op in align(ref, hyp):
            if op.op == MATCH:
                assert tokens_roughly_match(ref[op.ref_index], hyp[op.hyp_index])
            elif op.op == SUBSTITUTION:
                assert not tokens_roughly_match(ref[op.ref_index], hyp[op.hyp_index])
