"""Accuracy, reading rate, prosody score and severity from a matching result."""
from __future__ import annotations

import logging
import math
from typing import Sequence

from .models.aligned_word import MatchingResult, SpokenWord
from .models.report import Metrics, ProsodyBreakdown, Severity

logger = logging.getLogger(__name__)

# Prosody component weights (sum to 1.0)
ACCURACY_WEIGHT = 0.35
RATE_WEIGHT = 0.25
FLUENCY_WEIGHT = 0.25
SMOOTHNESS_WEIGHT = 0.15

# (minimum accuracy %, points), checked top-down
ACCURACY_BANDS = ((98, 4.0), (95, 3.5), (90, 3.0), (85, 2.5), (75, 2.0))
ACCURACY_FLOOR = 1.5

# (low wpm, high wpm, points), inclusive ranges checked top-down
RATE_BANDS = ((100, 180, 4.0), (80, 200, 3.5), (60, 220, 3.0))
RATE_FLOOR = 2.0

# (maximum error rate, points)
FLUENCY_BANDS = ((0.02, 4.0), (0.05, 3.5), (0.10, 3.0), (0.20, 2.5))
FLUENCY_FLOOR = 2.0

# (maximum disfluency rate, points)
SMOOTHNESS_BANDS = ((0.02, 4.0), (0.05, 3.5), (0.10, 3.0), (0.20, 2.5), (0.30, 2.0))
SMOOTHNESS_FLOOR = 1.5

# (minimum prosody score, grade)
GRADE_BANDS = ((3.8, "Excellent"), (3.0, "Proficient"), (2.0, "Developing"))
GRADE_FLOOR = "Needs Support"

# Severity framing
EXCELLENT_ACCURACY = 98
EXCELLENT_RATE = (100, 180)
EXCELLENT_MAX_ERROR_RATE = 0.02
MILD_ACCURACY = 93
MODERATE_ACCURACY = 85


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for positive values (2.5 -> 3, 0.25 -> 0.3).

    The built-in round() rounds halves to even, which would turn an accuracy
    of 72.5% into 72.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def accuracy_points(accuracy: float) -> float:
    for minimum, points in ACCURACY_BANDS:
        if accuracy >= minimum:
            return points
    return ACCURACY_FLOOR


def rate_points(words_per_minute: float) -> float:
    for low, high, points in RATE_BANDS:
        if low <= words_per_minute <= high:
            return points
    return RATE_FLOOR


def fluency_points(error_rate: float) -> float:
    for maximum, points in FLUENCY_BANDS:
        if error_rate <= maximum:
            return points
    return FLUENCY_FLOOR


def smoothness_points(disfluency_rate: float) -> float:
    for maximum, points in SMOOTHNESS_BANDS:
        if disfluency_rate <= maximum:
            return points
    return SMOOTHNESS_FLOOR


def prosody_score(accuracy_pts: float, rate_pts: float, fluency_pts: float, smoothness_pts: float) -> float:
    """Weighted 0-4 prosody score, rounded to one decimal."""
    weighted = (
        accuracy_pts * ACCURACY_WEIGHT
        + rate_pts * RATE_WEIGHT
        + fluency_pts * FLUENCY_WEIGHT
        + smoothness_pts * SMOOTHNESS_WEIGHT
    )
    return round_half_up(weighted, 1)


def prosody_grade(score: float) -> str:
    for minimum, grade in GRADE_BANDS:
        if score >= minimum:
            return grade
    return GRADE_FLOOR


def audio_duration(spoken_words: Sequence[SpokenWord]) -> float:
    """Recording length as seen by the transcript: end of the last spoken word."""
    if not spoken_words:
        return 0.0
    return spoken_words[-1].end_time


def compute_metrics(result: MatchingResult, audio_duration: float) -> Metrics:
    """
    Compute accuracy, words per minute and the four-component prosody score.

    Prosody components:
    - Accuracy (35%): percentage of expected words read correctly
    - Rate (25%): words per minute against the 100-180 target range
    - Fluency (25%): error rate, errors / total words
    - Smoothness (15%): disfluency rate, (hesitations + fillers + repeats) / total words

    Args:
        result: Alignment output from detect_and_align
        audio_duration: Reading duration in seconds (end of the last spoken word)

    Returns:
        Metrics; all rates are 0 for an empty result or a non-positive duration
    """
    total = len(result.words)

    accuracy = int(round_half_up(result.correct_count / total * 100)) if total > 0 else 0

    words_read = result.correct_count + result.misread_count + result.substitution_count
    minutes = audio_duration / 60
    words_per_minute = int(round_half_up(words_read / minutes)) if minutes > 0 else 0

    error_rate = result.error_count / total if total > 0 else 0.0
    disfluencies = result.hesitation_count + result.filler_word_count + result.repeat_count
    disfluency_rate = disfluencies / total if total > 0 else 0.0

    breakdown = ProsodyBreakdown(
        accuracy_points=accuracy_points(accuracy),
        rate_points=rate_points(words_per_minute),
        fluency_points=fluency_points(error_rate),
        smoothness_points=smoothness_points(disfluency_rate),
        error_rate=error_rate,
        disfluency_rate=disfluency_rate,
    )
    score = prosody_score(
        breakdown.accuracy_points,
        breakdown.rate_points,
        breakdown.fluency_points,
        breakdown.smoothness_points,
    )
    grade = prosody_grade(score)

    logger.debug(
        "Metrics: accuracy=%d%%, wpm=%d, hesitations=%d, fillers=%d, repeats=%d, prosody=%.1f",
        accuracy, words_per_minute, result.hesitation_count,
        result.filler_word_count, result.repeat_count, score,
    )

    return Metrics(
        accuracy=accuracy,
        words_per_minute=words_per_minute,
        prosody_score=score,
        prosody_grade=grade,
        total_words=total,
        correct_count=result.correct_count,
        error_count=result.error_count,
        skip_count=result.skip_count,
        hesitation_count=result.hesitation_count,
        filler_word_count=result.filler_word_count,
        repeat_count=result.repeat_count,
        self_correction_count=result.self_correction_count,
        breakdown=breakdown,
    )


def classify_severity(metrics: Metrics) -> Severity:
    """Referral framing: excellent, mild, moderate or significant difficulty."""
    error_rate = metrics.error_count / metrics.total_words if metrics.total_words > 0 else 0.0
    low, high = EXCELLENT_RATE
    if (
        metrics.accuracy >= EXCELLENT_ACCURACY
        and low <= metrics.words_per_minute <= high
        and error_rate <= EXCELLENT_MAX_ERROR_RATE
    ):
        return Severity.EXCELLENT
    if metrics.accuracy >= MILD_ACCURACY:
        return Severity.MILD
    if metrics.accuracy >= MODERATE_ACCURACY:
        return Severity.MODERATE
    return Severity.SIGNIFICANT
