"""Data models shared by the alignment, metrics and pattern components."""
from .aligned_word import (
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
from .report import (
    ErrorPattern,
    ErrorPatternType,
    Metrics,
    PatternKey,
    ProsodyBreakdown,
    Severity,
)

__all__ = [
    "AlignedWord",
    "BoundingBox",
    "ExpectedWord",
    "MatchingResult",
    "PassageRange",
    "SpokenWord",
    "WordStatus",
    "as_expected_words",
    "as_spoken_words",
    "expected_words_from_text",
    "ErrorPattern",
    "ErrorPatternType",
    "Metrics",
    "PatternKey",
    "ProsodyBreakdown",
    "Severity",
]
