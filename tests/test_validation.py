import pytest

from oral_reading.exceptions import (
    InvalidConfidenceError,
    InvalidInputError,
    InvalidTimingError,
    ReadingAssessmentError,
)
from oral_reading.models import BoundingBox, ExpectedWord
from oral_reading.validation import validate_expected_words, validate_spoken_words


def test_valid_spoken_words_pass(make_spoken):
    validate_spoken_words(make_spoken(("the", 0.0, 0.3, 0.9), ("cat", 0.3, 0.3, 1.0), ("sat", 0.5, 0.9, 0.0)))
    validate_spoken_words([])


def test_negative_timestamp_rejected(make_spoken):
    with pytest.raises(InvalidTimingError) as excinfo:
        validate_spoken_words(make_spoken(("the", -0.1, 0.3)))
    assert excinfo.value.index == 0


def test_start_after_end_rejected(make_spoken):
    with pytest.raises(InvalidTimingError, match="spoken word 1"):
        validate_spoken_words(make_spoken(("the", 0.0, 0.3), ("cat", 0.8, 0.5)))


def test_decreasing_start_rejected(make_spoken):
    with pytest.raises(InvalidTimingError) as excinfo:
        validate_spoken_words(make_spoken(("the", 0.5, 0.8), ("cat", 0.2, 0.9)))
    assert excinfo.value.index == 1


def test_confidence_out_of_range_rejected(make_spoken):
    with pytest.raises(InvalidConfidenceError) as excinfo:
        validate_spoken_words(make_spoken(("the", 0.0, 0.3, 1.5)))
    assert excinfo.value.confidence == 1.5


def test_error_hierarchy():
    assert issubclass(InvalidTimingError, InvalidInputError)
    assert issubclass(InvalidConfidenceError, InvalidInputError)
    assert issubclass(InvalidInputError, ReadingAssessmentError)
    assert issubclass(InvalidInputError, ValueError)


def test_expected_words_validation():
    validate_expected_words([ExpectedWord("The"), ExpectedWord("cat.")])
    with pytest.raises(InvalidInputError, match="OCR word 1"):
        validate_expected_words([ExpectedWord("The"), ExpectedWord("  ")])
    with pytest.raises(InvalidInputError):
        validate_expected_words([ExpectedWord("The", BoundingBox(0, 0, -5, 10))])
