"""Disfluency detection rules and thresholds for oral reading assessment."""
from __future__ import annotations

# Re-export filler and punctuation sets from alignment.normalizer for convenience
from ..alignment.normalizer import FILLER_WORDS, NATURAL_PAUSE_PUNCTUATION

# A pause longer than this before a word is a hesitation
HESITATION_THRESHOLD = 0.5  # seconds

# Repeat / self-correction detection between consecutive spoken words
REPEAT_SIMILARITY = 0.85              # similar words with a shared prefix: stutter
SELF_CORRECTION_MIN_SIMILARITY = 0.4  # related words with a shared prefix: revised attempt
ABANDONED_PREFIX_MAX_LEN = 3          # "th" -> "three": abandoned start
MIN_PREFIX_WORD_LEN = 2               # both words need this many characters for prefix checks

# Quick succession: a related word following almost immediately
QUICK_SUCCESSION_GAP = 0.2  # seconds
QUICK_SUCCESSION_SIMILARITY = (0.3, 0.7)  # [min, max)

__all__ = [
    "FILLER_WORDS",
    "NATURAL_PAUSE_PUNCTUATION",
    "HESITATION_THRESHOLD",
    "REPEAT_SIMILARITY",
    "SELF_CORRECTION_MIN_SIMILARITY",
    "ABANDONED_PREFIX_MAX_LEN",
    "MIN_PREFIX_WORD_LEN",
    "QUICK_SUCCESSION_GAP",
    "QUICK_SUCCESSION_SIMILARITY",
]
