# tests/conftest.py
import pytest

from oral_reading.models import AlignedWord, ExpectedWord, SpokenWord, WordStatus


@pytest.fixture()
def make_spoken():
    """Build SpokenWords from (text, start, end[, confidence]) tuples."""
    def _make(*items):
        return [SpokenWord(*item) for item in items]
    return _make


@pytest.fixture()
def make_expected():
    def _make(*texts):
        return [ExpectedWord(t) for t in texts]
    return _make


@pytest.fixture()
def make_aligned():
    """Build an AlignedWord; `spoken` defaults to the expected text unless skipped."""
    def _make(expected, spoken=None, status=WordStatus.CORRECT, **flags):
        if spoken is None and status is not WordStatus.SKIPPED:
            spoken = expected
        return AlignedWord(expected=expected, spoken=spoken, status=status, **flags)
    return _make


@pytest.fixture()
def cat_sat_scenario():
    # "The cat sat" read cleanly, 0.3 s per word
    return (
        ["The", "cat", "sat"],
        [
            {"word": "The", "startTime": 0.0, "endTime": 0.3, "confidence": 0.9},
            {"word": "cat", "startTime": 0.3, "endTime": 0.6, "confidence": 0.9},
            {"word": "sat", "startTime": 0.6, "endTime": 0.9, "confidence": 0.9},
        ],
    )
