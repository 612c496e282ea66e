"""Frequency-ranked error patterns over an aligned word list."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .models.aligned_word import AlignedWord, WordStatus
from .models.report import ErrorPattern, ErrorPatternType, PatternKey

logger = logging.getLogger(__name__)

# Glyph pairs commonly swapped by early readers
VISUAL_PAIRS: Tuple[Tuple[str, str], ...] = (("b", "d"), ("p", "q"), ("m", "n"), ("u", "n"))

LONG_WORD_LENGTH = 7
LENGTH_DIFFERENCE = 2  # spoken shorter/longer by this many letters: omission/addition
MAX_EXAMPLES = 5

DESCRIPTIONS = {
    ErrorPatternType.INITIAL_SOUND: "Initial consonant substitution",
    ErrorPatternType.FINAL_SOUND: "Final sound error",
    ErrorPatternType.OMISSION: "Sounds/syllables omitted",
    ErrorPatternType.ADDITION: "Extra sounds/syllables added",
    ErrorPatternType.WORD_LENGTH: f"Difficulty with long words ({LONG_WORD_LENGTH}+ letters)",
    ErrorPatternType.HESITATION: "Hesitation before word (pause > 0.5s)",
    ErrorPatternType.REPETITION: "Word repeated",
}


@dataclass
class _Accumulator:
    description: str
    examples: List[Tuple[str, str]] = field(default_factory=list)
    count: int = 0


def _describe(key: PatternKey, example: Tuple[str, str]) -> str:
    if key.type is ErrorPatternType.VISUAL_SIMILARITY:
        return "Visual confusion: {}/{}".format(*key.detail)
    if key.type is ErrorPatternType.SUBSTITUTION:
        return '"{}" -> "{}"'.format(*example)
    return DESCRIPTIONS[key.type]


def _visual_confusions(expected: str, spoken: str) -> List[Tuple[str, str]]:
    """Glyph pairs with one glyph in the expected word and the other in the spoken word."""
    return [
        (a, b)
        for a, b in VISUAL_PAIRS
        if (a in expected and b in spoken) or (b in expected and a in spoken)
    ]


def _pattern_keys(word: AlignedWord) -> List[PatternKey]:
    """Error categories one aligned word contributes to, in reporting order."""
    keys: List[PatternKey] = []

    if word.hesitation:
        keys.append(PatternKey(ErrorPatternType.HESITATION))
    if word.is_repeat:
        keys.append(PatternKey(ErrorPatternType.REPETITION))

    if word.status is WordStatus.CORRECT or not word.spoken:
        return keys

    expected = word.expected.lower()
    spoken = word.spoken.lower()

    if expected[:1] != spoken[:1]:
        keys.append(PatternKey(ErrorPatternType.INITIAL_SOUND))
    if expected[-1:] != spoken[-1:]:
        keys.append(PatternKey(ErrorPatternType.FINAL_SOUND))
    for pair in _visual_confusions(expected, spoken):
        keys.append(PatternKey(ErrorPatternType.VISUAL_SIMILARITY, pair))
    if len(spoken) <= len(expected) - LENGTH_DIFFERENCE:
        keys.append(PatternKey(ErrorPatternType.OMISSION))
    if len(spoken) >= len(expected) + LENGTH_DIFFERENCE:
        keys.append(PatternKey(ErrorPatternType.ADDITION))
    if len(expected) >= LONG_WORD_LENGTH:
        keys.append(PatternKey(ErrorPatternType.WORD_LENGTH))
    if word.status is WordStatus.SUBSTITUTED:
        keys.append(PatternKey(ErrorPatternType.SUBSTITUTION, (expected, spoken)))

    return keys


def analyze_error_patterns(
    words: Sequence[AlignedWord],
    *,
    max_examples: int = MAX_EXAMPLES,
) -> List[ErrorPattern]:
    """
    Group reading mistakes into recurring categories.

    Misread and substituted words are checked for initial/final sound errors,
    visual glyph confusions (b/d, p/q, m/n, u/n), omitted or added sounds,
    long-word difficulty and verbatim substitutions. Hesitation and repeat
    flags are counted on every word, correct ones included. Skipped words
    have nothing spoken to compare and only count towards fluency categories.

    Args:
        words: Aligned words from a MatchingResult
        max_examples: Cap on unique (expected, spoken) examples kept per pattern

    Returns:
        Patterns sorted by count, most frequent first (ties in first-seen order)
    """
    accumulators: Dict[PatternKey, _Accumulator] = {}

    for word in words:
        example = (word.expected, word.spoken or "")
        for key in _pattern_keys(word):
            acc = accumulators.get(key)
            if acc is None:
                acc = accumulators[key] = _Accumulator(description=_describe(key, example))
            acc.count += 1
            if example not in acc.examples and len(acc.examples) < max_examples:
                acc.examples.append(example)

    # sorted() is stable, dict order is insertion order
    ranked = sorted(accumulators.items(), key=lambda item: item[1].count, reverse=True)
    patterns = [
        ErrorPattern(
            type=key.type,
            description=acc.description,
            examples=tuple(acc.examples),
            count=acc.count,
        )
        for key, acc in ranked
    ]
    logger.debug("Error patterns: %d categories from %d words", len(patterns), len(words))
    return patterns
