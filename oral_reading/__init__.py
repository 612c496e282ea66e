"""Oral reading assessment: align a photographed passage with a reading transcript and score it."""
from .alignment import WordSimilarity, align_words, find_passage_range, word_similarity
from .error_patterns import analyze_error_patterns
from .exceptions import (
    InvalidConfidenceError,
    InvalidInputError,
    InvalidTimingError,
    ReadingAssessmentError,
)
from .lexicon import LexicalTables
from .models import (
    AlignedWord,
    BoundingBox,
    ErrorPattern,
    ErrorPatternType,
    ExpectedWord,
    MatchingResult,
    Metrics,
    PassageRange,
    Severity,
    SpokenWord,
    WordStatus,
)
from .pipeline import ReadingAssessment, assess_reading
from .report_generator import classify_severity, compute_metrics
from .scorer import detect_and_align

__version__ = "0.1.0"

__all__ = [
    "WordSimilarity",
    "align_words",
    "find_passage_range",
    "word_similarity",
    "analyze_error_patterns",
    "InvalidConfidenceError",
    "InvalidInputError",
    "InvalidTimingError",
    "ReadingAssessmentError",
    "LexicalTables",
    "AlignedWord",
    "BoundingBox",
    "ErrorPattern",
    "ErrorPatternType",
    "ExpectedWord",
    "MatchingResult",
    "Metrics",
    "PassageRange",
    "Severity",
    "SpokenWord",
    "WordStatus",
    "ReadingAssessment",
    "assess_reading",
    "classify_severity",
    "compute_metrics",
    "detect_and_align",
]
