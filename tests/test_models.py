import pytest

from oral_reading.exceptions import InvalidInputError
from oral_reading.models import (
    AlignedWord,
    BoundingBox,
    ExpectedWord,
    MatchingResult,
    PassageRange,
    SpokenWord,
    WordStatus,
    as_expected_words,
    as_spoken_words,
    expected_words_from_text,
)


def test_spoken_word_from_asr_dict():
    word = SpokenWord.from_dict({"word": "cat", "startTime": 0.1, "endTime": 0.4, "confidence": 0.9})
    assert word == SpokenWord("cat", 0.1, 0.4, 0.9)


def test_spoken_word_from_alternate_dict():
    word = SpokenWord.from_dict({"value": "cat", "start": 1, "end": 2})
    assert word == SpokenWord("cat", 1.0, 2.0, 1.0)


def test_spoken_word_without_text_rejected():
    with pytest.raises(InvalidInputError):
        SpokenWord.from_dict({"startTime": 0.1})


def test_expected_word_from_dict():
    word = ExpectedWord.from_dict({"text": "cat", "boundingBox": {"x": 1, "y": 2, "w": 3, "h": 4}})
    assert word.text == "cat"
    assert word.bounding_box == BoundingBox(1.0, 2.0, 3.0, 4.0)
    assert ExpectedWord.from_dict({"word": "dog"}).bounding_box == BoundingBox()
    with pytest.raises(InvalidInputError):
        ExpectedWord.from_dict({"boundingBox": {}})


def test_expected_words_from_text():
    words = expected_words_from_text("  The cat,\n sat. ")
    assert [w.text for w in words] == ["The", "cat,", "sat."]


def test_coercion_accepts_models_dicts_and_strings():
    expected = as_expected_words([ExpectedWord("The"), {"text": "cat"}, "sat"])
    assert [w.text for w in expected] == ["The", "cat", "sat"]
    spoken = as_spoken_words([SpokenWord("the"), {"word": "cat"}])
    assert [w.text for w in spoken] == ["the", "cat"]


def test_models_are_immutable():
    word = SpokenWord("cat")
    with pytest.raises(AttributeError):
        word.text = "dog"


def test_matching_result_counts_from_words():
    words = [
        AlignedWord("The", "the", WordStatus.CORRECT, hesitation=True),
        AlignedWord("cat", None, WordStatus.SKIPPED),
        AlignedWord("sat", "sit", WordStatus.MISREAD, is_self_correction=True),
        AlignedWord("on", "in", WordStatus.SUBSTITUTED, is_repeat=True),
    ]
    result = MatchingResult.from_words(words, filler_word_count=2, passage_range=PassageRange(0, 3, 3))
    assert result.correct_count == 1
    assert result.skip_count == 1
    assert result.misread_count == 1
    assert result.substitution_count == 1
    assert result.error_count == 3
    assert result.hesitation_count == 1
    assert result.repeat_count == 1
    assert result.self_correction_count == 1
    assert result.filler_word_count == 2


def test_to_dict_uses_camel_case():
    word = AlignedWord("cat", None, WordStatus.SKIPPED)
    data = word.to_dict()
    assert data["status"] == "skipped"
    assert data["spoken"] is None
    assert set(data) >= {"startTime", "endTime", "pauseDuration", "isRepeat", "isSelfCorrection", "boundingBox"}

    result = MatchingResult.from_words([word], passage_range=PassageRange(4, 4, 0)).to_dict()
    assert result["skipCount"] == 1
    assert result["errorCount"] == 1
    assert result["passageRange"] == {"firstIndex": 4, "lastIndex": 4, "matchedCount": 0}
    assert MatchingResult().to_dict()["passageRange"] is None
