import random

import pytest

from read_scoring import assess
from read_scoring.alignment import align, tokenize
from read_scoring.models import CORRECT, INSERTED, MISPRONOUNCED, OMITTED
from read_scoring.scorer import (
    integrity_score,
    match_score,
    overall_score,
    pronunciation_score,
    score,
    substitution_score,
)


def test_perfect_reading(the_cat_sat_words):
    report = assess("the cat sat", the_cat_sat_words)
    assert [d.status for d in report.details] == [CORRECT] * 3
    assert [d.score for d in report.details] == [90, 90, 90]
    assert report.integrity_score == 100
    assert report.pronunciation_score == 90
    assert report.fluency_score == 100
    # 90 * 0.5 + 100 * 0.3 + 100 * 0.2
    assert report.overall_score == 95
    assert report.summary.matches == 3
    assert report.summary.word_error_rate == 0.0


def test_missing_word_is_omitted(make_words):
    words = make_words([("the", 0.0, 0.3, 0.9), ("sat", 0.6, 0.9, 0.9)])
    report = assess("the dog sat", words)
    assert [d.status for d in report.details] == [CORRECT, OMITTED, CORRECT]
    assert report.details[1].word == "dog"
    assert report.details[1].score == 0
    assert report.integrity_score == 67
    assert report.pronunciation_score == 60


def test_omission_after_rough_match_goes_to_last_word(make_words):
    # "cat" and "sat" roughly match, so deletion-first backtrace drops "sat"
    words = make_words([("the", 0.0, 0.3, 0.9), ("sat", 0.6, 0.9, 0.9)])
    report = assess("the cat sat", words)
    omitted = [d for d in report.details if d.status == OMITTED]
    assert len(omitted) == 1
    assert omitted[0].score == 0
    assert report.integrity_score == 67
    assert report.overall_score == 70


@pytest.mark.parametrize("reference", ["", "   ", "!!!", None])
def test_empty_reference_scores_zero(reference, the_cat_sat_words):
    report = assess(reference, the_cat_sat_words)
    assert report.details == ()
    assert report.inserted == ()
    assert (
        report.overall_score,
        report.fluency_score,
        report.integrity_score,
        report.pronunciation_score,
    ) == (0, 0, 0, 0)


def test_near_miss_counts_as_correct(make_words):
    report = assess("cat", make_words([("kat", 0.0, 0.5, 0.8)]))
    assert report.details[0].status == CORRECT
    assert report.details[0].score == 80
    assert report.integrity_score == 100
    assert report.overall_score == 90


def test_substitution_is_mispronounced(make_words):
    report = assess("book", make_words([("back", 0.0, 0.5, 0.9)]))
    detail = report.details[0]
    assert detail.status == MISPRONOUNCED
    assert detail.score == 50
    assert report.integrity_score == 0
    assert report.summary.substitutions == 1


def test_unrelated_substitution_scores_floor(make_words):
    report = assess("cat", make_words([("dog", 0.0, 0.5, 0.9)]))
    assert report.details[0].score == 40


def test_pause_reduces_fluency(make_words):
    words = make_words([
        ("the", 0.0, 0.3, 0.9),
        ("cat", 0.9, 1.2, 0.9),
        ("sat", 1.2, 1.5, 0.9),
    ])
    report = assess("the cat sat", words)
    assert report.summary.pause_count == 1
    assert report.fluency_score == 95
    assert report.overall_score == 94


def test_gap_of_exactly_threshold_is_not_a_pause(make_words):
    words = make_words([("the", 0.0, 1.0, 0.9), ("cat", 1.5, 1.8, 0.9)])
    assert assess("the cat", words).fluency_score == 100


def test_many_pauses_floor_fluency_at_zero(make_words):
    words = make_words([(f"w{i}", i * 2.0, i * 2.0 + 0.2, 0.9) for i in range(30)])
    report = assess("w0", words)
    assert report.fluency_score == 0


def test_missing_confidence_defaults(make_words):
    report = assess("hello", make_words([("hello", 0.0, 0.4, None)]))
    assert report.details[0].score == 95


def test_no_recognized_words_omits_everything():
    report = assess("the cat", [])
    assert [d.status for d in report.details] == [OMITTED, OMITTED]
    assert report.pronunciation_score == 0
    assert report.integrity_score == 0
    assert report.fluency_score == 100
    assert report.overall_score == 20
    assert report.details[0].time_window.start == 0.0
    assert report.details[0].time_window.end == pytest.approx(0.4)


def test_inserted_words_are_kept_apart(make_words):
    words = make_words([("the", 0.0, 0.2, 0.9), ("big", 0.3, 0.5, 0.7), ("cat", 0.6, 0.9, 0.9)])
    report = assess("the cat", words)
    assert [d.word for d in report.details] == ["the", "cat"]
    assert len(report.inserted) == 1
    assert report.inserted[0].word == "big"
    assert report.inserted[0].status == INSERTED
    assert report.integrity_score == 100
    assert report.summary.insertions == 1
    assert report.summary.word_error_rate == pytest.approx(0.5)


def test_details_carry_time_windows(the_cat_sat_words):
    report = assess("the cat sat", the_cat_sat_words)
    window = report.details[1].time_window
    assert window.start == pytest.approx(0.1)
    assert window.end == pytest.approx(0.9)


def test_score_with_explicit_ops(the_cat_sat_words):
    tokens = tokenize("the cat sat")
    ops = align([t.normalized for t in tokens], ["the", "cat", "sat"])
    report = score(tokens, the_cat_sat_words, ops)
    assert report.pronunciation_score == 90


def test_score_helpers():
    assert match_score(0.9) == 90
    assert match_score(None) == 95
    assert match_score(0.005) == 1
    assert substitution_score("book", "back") == 50
    assert pronunciation_score([]) == 0
    assert integrity_score(2, 3) == 67
    assert integrity_score(0, 0) == 0
    assert overall_score(90, 100, 100) == 95


def test_scores_stay_in_bounds_for_arbitrary_input(make_words):
    rng = random.Random(17)
    vocab = ["the", "cat", "sat", "on", "a", "mat", "quickly", "dog"]
    for _ in range(200):
        reference = " ".join(rng.choice(vocab) for _ in range(rng.randint(0, 8)))
        entries = []
        t = 0.0
        for _ in range(rng.randint(0, 12)):
            t += rng.uniform(0, 1.5)
            entries.append((rng.choice(vocab), t, t + rng.uniform(0, 0.5), rng.random()))
        report = assess(reference, make_words(entries))
        for value in (
            report.overall_score,
            report.fluency_score,
            report.integrity_score,
            report.pronunciation_score,
        ):
            assert isinstance(value, int)
            assert 0 <= value <= 100
        assert len(report.details) == len(tokenize(reference))
        assert all(0 <= d.score <= 100 for d in report.details)


def test_report_to_dict(the_cat_sat_words):
    out = assess("the cat sat", the_cat_sat_words).to_dict()
    assert out["overallScore"] == 95
    assert out["integrityScore"] == 100
    assert out["details"][0]["status"] == "correct"
    assert set(out["details"][0]["timeWindow"]) == {"start", "end"}
    assert out["summary"]["pauseCount"] == 0
