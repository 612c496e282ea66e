"""Strengths, struggles and the primary error pattern for summary generators."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .models.aligned_word import AlignedWord, WordStatus
from .models.report import ErrorPattern, ErrorPatternType

STRENGTH_MIN_LENGTH = 6
# Long but common words that say little about reading skill
COMMON_LONG_WORDS = frozenset({"because", "before", "through", "people", "should", "would", "could"})

# Patterns that describe fluency rather than decoding; reported only as a last resort
FLUENCY_PATTERNS = frozenset({ErrorPatternType.HESITATION, ErrorPatternType.REPETITION})


def extract_strengths(words: Sequence[AlignedWord], limit: int = 3) -> List[str]:
    """Challenging words read correctly, longest first.

    Only words of 6+ letters count, minus a short list of common long words.
    """
    strengths: List[str] = []
    for word in words:
        if word.status is not WordStatus.CORRECT or len(word.expected) < STRENGTH_MIN_LENGTH:
            continue
        if word.expected.lower() in COMMON_LONG_WORDS or word.expected in strengths:
            continue
        strengths.append(word.expected)
    strengths.sort(key=len, reverse=True)
    return strengths[:limit]


def extract_struggles(words: Sequence[AlignedWord], limit: int = 3) -> List[Tuple[str, str]]:
    """(expected, spoken) pairs of misread or substituted words, in reading order."""
    struggles = [
        (word.expected, word.spoken)
        for word in words
        if word.status in (WordStatus.MISREAD, WordStatus.SUBSTITUTED) and word.spoken
    ]
    return struggles[:limit]


def primary_pattern(patterns: Sequence[ErrorPattern]) -> Optional[ErrorPattern]:
    """Most frequent pattern, preferring decoding patterns over fluency ones.

    Args:
        patterns: Output of analyze_error_patterns (sorted by count)

    Returns:
        The pattern to lead a summary with, or None when there are none
    """
    if not patterns:
        return None
    for pattern in patterns:
        if pattern.type not in FLUENCY_PATTERNS:
            return pattern
    return patterns[0]
