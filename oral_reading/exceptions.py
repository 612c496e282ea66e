"""Exceptions raised at the edges of the oral reading scorer.

The scoring core itself never raises on degenerate input; these are raised by
the input adapters and the validation wrapper in front of it.
"""
from __future__ import annotations


class ReadingAssessmentError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInputError(ReadingAssessmentError, ValueError):
    """Raised when collaborator input cannot be used for an assessment."""


class InvalidTimingError(InvalidInputError):
    """Raised when spoken-word timestamps are negative, inverted or out of order."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(f"spoken word {index}: {message}")


class InvalidConfidenceError(InvalidInputError):
    """Raised when an ASR confidence falls outside 0..1."""

    def __init__(self, index: int, confidence: float):
        self.index = index
        self.confidence = confidence
        super().__init__(f"spoken word {index}: confidence {confidence!r} is outside 0..1")
