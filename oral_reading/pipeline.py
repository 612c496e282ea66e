"""End-to-end oral reading assessment over pre-computed OCR and ASR word lists."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .error_patterns import analyze_error_patterns
from .feedback import extract_strengths, extract_struggles, primary_pattern
from .lexicon.cmudict import find_cmudict_homophones
from .lexicon.homophones import DEFAULT_TABLES, LexicalTables
from .models.aligned_word import (
    ExpectedWord,
    MatchingResult,
    SpokenWord,
    as_expected_words,
    as_spoken_words,
)
from .models.report import ErrorPattern, Metrics, Severity
from .pause.rules import HESITATION_THRESHOLD
from .report_generator import audio_duration, classify_severity, compute_metrics
from .scorer.word_level_matcher import detect_and_align
from .validation import validate_expected_words, validate_spoken_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadingAssessment:
    """Everything derived from one reading: alignment, metrics, patterns and feedback."""

    result: MatchingResult
    metrics: Metrics
    error_patterns: Tuple[ErrorPattern, ...]
    severity: Severity
    audio_duration: float
    strengths: Tuple[str, ...] = ()
    struggles: Tuple[Tuple[str, str], ...] = ()
    primary_pattern: Optional[ErrorPattern] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matching": self.result.to_dict(),
            "metrics": self.metrics.to_dict(),
            "errorPatterns": [p.to_dict() for p in self.error_patterns],
            "severity": self.severity.value,
            "audioDuration": self.audio_duration,
            "strengths": list(self.strengths),
            "struggles": [{"expected": e, "spoken": s} for e, s in self.struggles],
            "primaryPattern": self.primary_pattern.to_dict() if self.primary_pattern else None,
        }


def _tables_for(
    expected: Sequence[ExpectedWord],
    spoken: Sequence[SpokenWord],
    use_cmudict: bool,
) -> LexicalTables:
    if not use_cmudict:
        return DEFAULT_TABLES
    vocabulary = [w.text for w in expected] + [w.text for w in spoken]
    try:
        groups = find_cmudict_homophones(vocabulary)
    except LookupError as e:
        logger.warning("CMUdict unavailable, using static homophone tables: %s", e)
        return DEFAULT_TABLES
    logger.debug("Extending homophone tables with %d CMUdict groups", len(groups))
    return DEFAULT_TABLES.extended(groups)


def assess_reading(
    ocr_words: Sequence[Union[ExpectedWord, Mapping[str, Any], str]],
    spoken_words: Sequence[Union[SpokenWord, Mapping[str, Any]]],
    *,
    use_cmudict: bool = False,
    validate: bool = True,
    hesitation_threshold: float = HESITATION_THRESHOLD,
) -> ReadingAssessment:
    """
    Main oral reading assessment orchestrator.

    Pipeline flow:
    1. Coerce OCR and ASR collaborator output to word models
    2. Validate timestamps, confidences and OCR text (optional)
    3. Build lexical tables, extended with CMUdict homophones of this reading (optional)
    4. Detect the passage and align it against the transcript
    5. Compute metrics, severity, error patterns and summary feedback

    Args:
        ocr_words: OCR words of the page (models, dicts or strings)
        spoken_words: ASR words in time order (models or dicts)
        use_cmudict: Discover extra homophones with the CMU Pronouncing Dictionary
        validate: Reject malformed input before scoring
        hesitation_threshold: Pause in seconds above which a word is a hesitation

    Returns:
        ReadingAssessment

    Raises:
        InvalidInputError: Malformed input (only raised for dicts missing text,
            or by validation when `validate` is True)
    """
    expected = as_expected_words(ocr_words)
    spoken = as_spoken_words(spoken_words)

    if validate:
        validate_expected_words(expected)
        validate_spoken_words(spoken)

    tables = _tables_for(expected, spoken, use_cmudict)

    result = detect_and_align(
        expected, spoken, tables=tables, hesitation_threshold=hesitation_threshold
    )
    duration = audio_duration(spoken)
    metrics = compute_metrics(result, duration)
    patterns = analyze_error_patterns(result.words)
    severity = classify_severity(metrics)

    logger.info(
        "Assessment: %d words, accuracy=%d%%, wpm=%d, prosody=%.1f (%s), severity=%s",
        metrics.total_words, metrics.accuracy, metrics.words_per_minute,
        metrics.prosody_score, metrics.prosody_grade, severity.value,
    )

    return ReadingAssessment(
        result=result,
        metrics=metrics,
        error_patterns=tuple(patterns),
        severity=severity,
        audio_duration=duration,
        strengths=tuple(extract_strengths(result.words)),
        struggles=tuple(extract_struggles(result.words)),
        primary_pattern=primary_pattern(patterns),
    )


if __name__ == "__main__":
    # Example usage
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ocr_words: List[Union[ExpectedWord, str]] = ["Chapter", "1", "The", "cat", "sat", "on", "the", "mat."]
    spoken_words = [
        {"word": "the", "startTime": 0.0, "endTime": 0.3, "confidence": 0.95},
        {"word": "um", "startTime": 0.3, "endTime": 0.5, "confidence": 0.60},
        {"word": "cat", "startTime": 0.5, "endTime": 0.8, "confidence": 0.92},
        {"word": "sat", "startTime": 1.5, "endTime": 1.8, "confidence": 0.90},
        {"word": "on", "startTime": 1.8, "endTime": 2.0, "confidence": 0.93},
        {"word": "the", "startTime": 2.0, "endTime": 2.2, "confidence": 0.94},
        {"word": "map", "startTime": 2.2, "endTime": 2.6, "confidence": 0.81},
    ]

    assessment = assess_reading(ocr_words, spoken_words)

    print("\n=== Words ===")
    for w in assessment.result.words:
        flag = " (hesitation)" if w.hesitation else ""
        print(f"{w.expected:10s} {w.status.value:12s} spoken={w.spoken!r}{flag}")

    m = assessment.metrics
    print("\n=== Metrics ===")
    print(f"Accuracy: {m.accuracy}%")
    print(f"Words per minute: {m.words_per_minute}")
    print(f"Prosody: {m.prosody_score} ({m.prosody_grade})")
    print(f"Severity: {assessment.severity.value}")

    print("\n=== Error patterns ===")
    for p in assessment.error_patterns:
        print(f"{p.count}x {p.description}: {list(p.examples)}")
