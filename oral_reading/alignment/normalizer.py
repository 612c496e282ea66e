"""Word normalization utilities for similarity scoring and alignment."""
from __future__ import annotations

import re
from typing import Sequence, Tuple

# Filler words dropped from the transcript before matching (normalized form)
FILLER_WORDS = frozenset({"um", "uh", "er", "ah", "like", "so", "well", "hmm", "mm", "erm"})

# Passage punctuation after which a pause is natural, not a hesitation.
# Apostrophes and quotation marks are not included.
NATURAL_PAUSE_PUNCTUATION = (".", ",", ";", ":", "!", "?", "-", "—", "–")

# Trailing contraction suffix -> expansion, checked in order
CONTRACTIONS: Sequence[Tuple[str, str]] = (
    ("n't", " not"),
    ("'re", " are"),
    ("'ve", " have"),
    ("'ll", " will"),
    ("'d", " would"),
    ("'m", " am"),
    ("'s", ""),  # possessive or "is"
)

# OCR character confusions: (what OCR might read, the likely intended glyph).
# Applied in order as global replacements; both sides of a comparison are
# canonicalized, so a machine misread is not counted as a student error.
OCR_CONFUSIONS: Sequence[Tuple[str, str]] = (
    ("0", "o"),
    ("1", "l"),
    ("1", "i"),
    ("5", "s"),
    ("8", "b"),
    ("6", "g"),
    ("rn", "m"),
    ("cl", "d"),
    ("vv", "w"),
    ("li", "h"),
    ("ii", "u"),
    ("c", "e"),
    ("n", "h"),
)

_NATURAL_PAUSE_PATTERN = re.compile("[" + re.escape("".join(NATURAL_PAUSE_PUNCTUATION)) + "]$")


def normalize_word(word: str) -> str:
    """Normalize a word for matching.

    Lowercases, drops everything except letters, digits and apostrophes, and
    expands a trailing contraction ("don't" -> "do not", "cat's" -> "cat").

    Args:
        word: Raw OCR or ASR token

    Returns:
        Normalized word, possibly empty
    """
    normalized = re.sub(r"[^a-z0-9']", "", word.lower())
    for suffix, expansion in CONTRACTIONS:
        if normalized.endswith(suffix):
            normalized = normalized[: -len(suffix)] + expansion
            break
    return normalized.strip()


def normalize_ocr_confusions(word: str) -> str:
    """Map visually confusable glyphs to a canonical form ("rnodern" -> "modem")."""
    normalized = word.lower()
    for ocr_glyph, actual in OCR_CONFUSIONS:
        normalized = normalized.replace(ocr_glyph, actual)
    return normalized


def is_filler_word(word: str) -> bool:
    """Check whether a spoken token is a filler (um, uh, like, ...)."""
    return normalize_word(word) in FILLER_WORDS


def ends_with_natural_pause(text: str) -> bool:
    """Check whether raw passage text ends in punctuation that invites a pause.

    Apostrophes and quotation marks do not count.
    """
    return bool(_NATURAL_PAUSE_PATTERN.search(text.strip()))


def shares_prefix(word1: str, word2: str, length: int = 3) -> bool:
    """Check whether two normalized words start the same way.

    Compares the first min(length, shorter word) characters.
    """
    if not word1 or not word2:
        return False
    n = min(length, len(word1), len(word2))
    return word1[:n] == word2[:n]
