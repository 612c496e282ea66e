import pytest

from oral_reading.alignment import WordSimilarity
from oral_reading.pause import (
    classify_pair,
    detect_disfluencies,
    detect_hesitations,
    detect_repeats_and_self_corrections,
    measure_pauses,
    remove_filler_words,
)
from oral_reading.pause.disfluency import REPEAT, SELF_CORRECTION
from oral_reading.models import SpokenWord


@pytest.fixture()
def scorer():
    return WordSimilarity()


def pair(first, second, gap=0.5):
    return SpokenWord(first, 0.0, 0.3), SpokenWord(second, 0.3 + gap, 0.6 + gap)


def test_remove_filler_words(make_spoken):
    clean, count = remove_filler_words(
        make_spoken(("um", 0, 0.1), ("the", 0.1, 0.2), ("Uh,", 0.2, 0.3), ("cat", 0.3, 0.4))
    )
    assert [w.text for w in clean] == ["the", "cat"]
    assert count == 2


def test_measure_pauses(make_spoken):
    pauses = measure_pauses(make_spoken(("the", 0.0, 0.3), ("cat", 1.2, 1.5), ("sat", 1.4, 1.6)))
    assert pauses[0] == 0.0
    assert pauses[1] == pytest.approx(0.9)
    # overlapping timestamps clamp to zero
    assert pauses[2] == 0.0


def test_detect_hesitations_threshold_is_exclusive():
    assert detect_hesitations([0.0, 0.9, 0.5, 0.51]) == {1, 3}
    assert detect_hesitations([0.0, 0.9], threshold=1.0) == set()


def test_same_word_is_repeat(scorer):
    assert classify_pair(*pair("the", "The"), scorer) == REPEAT


def test_near_identical_with_shared_prefix_is_repeat(scorer):
    # similarity 0.6 + 0.35 * 6/7 = 0.9
    assert classify_pair(*pair("running", "runnin"), scorer) == REPEAT


def test_related_attempt_with_shared_prefix_is_self_correction(scorer):
    # similarity 0.6 + 0.35 * 3/7 = 0.75
    assert classify_pair(*pair("sit", "sitting"), scorer) == SELF_CORRECTION


def test_abandoned_start_is_self_correction(scorer):
    # similarity 0.2 is too low for the shared-prefix rule
    assert scorer.similarity("th", "thoroughly") < 0.4
    assert classify_pair(*pair("th", "thoroughly"), scorer) == SELF_CORRECTION


def test_single_letter_start_not_flagged(scorer):
    assert classify_pair(*pair("a", "apple"), scorer) is None


def test_quick_succession_is_self_correction(scorer):
    # similarity 0.6, no shared prefix
    assert classify_pair(*pair("fast", "mist", gap=0.1), scorer) == SELF_CORRECTION
    assert classify_pair(*pair("fast", "mist", gap=0.5), scorer) is None


def test_unrelated_words_not_flagged(scorer):
    assert classify_pair(*pair("the", "cat", gap=0.0), scorer) is None


def test_repeat_takes_priority_over_quick_succession(scorer):
    assert classify_pair(*pair("the", "the", gap=0.05), scorer) == REPEAT


def test_only_later_word_flagged_and_sets_disjoint(make_spoken):
    spoken = make_spoken(
        ("the", 0.0, 0.2),
        ("the", 0.2, 0.4),
        ("sit", 0.4, 0.6),
        ("sitting", 0.6, 0.9),
        ("down", 0.9, 1.1),
    )
    repeats, corrections = detect_repeats_and_self_corrections(spoken)
    assert repeats == {1}
    assert corrections == {3}
    assert not repeats & corrections


def test_detect_disfluencies_indexes_clean_transcript(make_spoken):
    spoken = make_spoken(("the", 0.0, 0.2), ("um", 0.2, 0.4), ("the", 0.4, 0.6), ("cat", 1.5, 1.8))
    report = detect_disfluencies(spoken)
    assert [w.text for w in report.spoken_words] == ["the", "the", "cat"]
    assert report.filler_word_count == 1
    assert report.pause_durations == pytest.approx((0.0, 0.2, 0.9))
    assert report.hesitation_indices == {2}
    assert report.repeat_indices == {1}
    assert report.self_correction_indices == frozenset()


def test_detect_disfluencies_custom_threshold(make_spoken):
    spoken = make_spoken(("the", 0.0, 0.2), ("cat", 0.6, 0.8))
    assert detect_disfluencies(spoken).hesitation_indices == frozenset()
    assert detect_disfluencies(spoken, hesitation_threshold=0.3).hesitation_indices == {1}
