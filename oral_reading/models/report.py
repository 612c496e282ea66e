"""Data model for metrics and error patterns derived from a matching result."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Tuple


class Severity(str, Enum):
    """Referral framing derived from accuracy and rate."""

    EXCELLENT = "excellent"
    MILD = "mild"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"


class ErrorPatternType(str, Enum):
    INITIAL_SOUND = "initial_sound"
    FINAL_SOUND = "final_sound"
    VISUAL_SIMILARITY = "visual_similarity"
    SUBSTITUTION = "substitution"
    OMISSION = "omission"
    ADDITION = "addition"
    WORD_LENGTH = "word_length"
    HESITATION = "hesitation"
    REPETITION = "repetition"


class PatternKey(NamedTuple):
    """Grouping key for error patterns.

    `detail` distinguishes entries of the same type, e.g. the glyph pair of a
    visual confusion or the (expected, spoken) pair of a substitution.
    """
    type: ErrorPatternType
    detail: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ProsodyBreakdown:
    """The four weighted prosody components and the rates behind them."""

    accuracy_points: float
    rate_points: float
    fluency_points: float
    smoothness_points: float
    error_rate: float
    disfluency_rate: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "accuracyPoints": self.accuracy_points,
            "ratePoints": self.rate_points,
            "fluencyPoints": self.fluency_points,
            "smoothnessPoints": self.smoothness_points,
            "errorRate": self.error_rate,
            "disfluencyRate": self.disfluency_rate,
        }


@dataclass(frozen=True)
class Metrics:
    accuracy: int
    words_per_minute: int
    prosody_score: float
    prosody_grade: str
    total_words: int
    correct_count: int
    error_count: int
    skip_count: int
    hesitation_count: int = 0
    filler_word_count: int = 0
    repeat_count: int = 0
    self_correction_count: int = 0
    breakdown: Optional[ProsodyBreakdown] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accuracy": self.accuracy,
            "wordsPerMinute": self.words_per_minute,
            "prosodyScore": self.prosody_score,
            "prosodyGrade": self.prosody_grade,
            "totalWords": self.total_words,
            "correctCount": self.correct_count,
            "errorCount": self.error_count,
            "skipCount": self.skip_count,
            "hesitationCount": self.hesitation_count,
            "fillerWordCount": self.filler_word_count,
            "repeatCount": self.repeat_count,
            "selfCorrectionCount": self.self_correction_count,
            "breakdown": self.breakdown.to_dict() if self.breakdown else None,
        }


@dataclass(frozen=True)
class ErrorPattern:
    """A recurring mistake category with literal examples.

    Attributes:
        type: Category of the pattern
        description: Human-readable label for report generators
        examples: Unique (expected, spoken) pairs, capped
        count: Number of occurrences (not capped)
    """
    type: ErrorPatternType
    description: str
    examples: Tuple[Tuple[str, str], ...]
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "description": self.description,
            "examples": [{"expected": e, "spoken": s} for e, s in self.examples],
            "count": self.count,
        }
