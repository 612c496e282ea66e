"""Precondition checks for collaborator input, run before the scoring core."""
from __future__ import annotations

from typing import Sequence

from .exceptions import InvalidConfidenceError, InvalidInputError, InvalidTimingError
from .models.aligned_word import ExpectedWord, SpokenWord


def validate_spoken_words(spoken_words: Sequence[SpokenWord]) -> None:
    """Check ASR words for usable timestamps and confidences.

    Raises:
        InvalidTimingError: negative time, end before start, or a start time
            earlier than the previous word's
        InvalidConfidenceError: confidence outside 0..1
    """
    previous_start = 0.0
    for index, word in enumerate(spoken_words):
        if word.start_time < 0 or word.end_time < 0:
            raise InvalidTimingError(index, "timestamps must be non-negative")
        if word.start_time > word.end_time:
            raise InvalidTimingError(
                index, f"start {word.start_time} is after end {word.end_time}"
            )
        if word.start_time < previous_start:
            raise InvalidTimingError(
                index, f"start {word.start_time} is before previous start {previous_start}"
            )
        if not 0.0 <= word.confidence <= 1.0:
            raise InvalidConfidenceError(index, word.confidence)
        previous_start = word.start_time


def validate_expected_words(expected_words: Sequence[ExpectedWord]) -> None:
    """Check OCR words for text and non-negative box sizes.

    Raises:
        InvalidInputError: blank text or a negative box dimension
    """
    for index, word in enumerate(expected_words):
        if not word.text.strip():
            raise InvalidInputError(f"OCR word {index}: empty text")
        box = word.bounding_box
        if box.width < 0 or box.height < 0:
            raise InvalidInputError(f"OCR word {index}: negative bounding box size")
