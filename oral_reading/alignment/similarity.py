"""Word similarity scoring between passage (OCR) and transcript (ASR) words."""
from __future__ import annotations

from typing import Optional

from ..lexicon.homophones import DEFAULT_TABLES, LexicalTables
from ..lexicon.numbers import are_number_equivalents
from .edit_distance import levenshtein_distance
from .normalizer import normalize_ocr_confusions, normalize_word
from .rules import (
    EXACT_SCORE,
    HOMOPHONE_SCORE,
    PREFIX_BASE_SCORE,
    PREFIX_LEN,
    PREFIX_LENGTH_WEIGHT,
    SAME_LENGTH_BONUS,
)


class WordSimilarity:
    """Scores how closely two words match, from 0.0 (unrelated) to 1.0 (same word).

    Rules are evaluated in order and the first one that applies wins:

    1. Normalize both words (lowercase, strip punctuation, expand contractions).
       Either side empty -> 0.0.
    2. Exact match -> 1.0.
    3. Same word once OCR glyph confusions are canonicalized -> 1.0 (machine
       misread, not a reading error).
    4. Same number ("fifteen" / "15", "1st" / "first") -> 1.0.
    5. Homophones or known name/contraction variants -> 0.95.
    6. Same first three letters -> 0.6 + 0.35 * shorter/longer.
    7. Edit distance on the normalized and on the OCR-canonical forms, the
       smaller one wins -> 1 - distance/longer, +0.1 for equal lengths.

    The scorer is pure; the lexical tables it consults are injected.
    """

    def __init__(self, tables: Optional[LexicalTables] = None):
        self.tables = tables or DEFAULT_TABLES

    def __call__(self, word1: str, word2: str) -> float:
        return self.similarity(word1, word2)

    def similarity(self, word1: str, word2: str) -> float:
        w1 = normalize_word(word1)
        w2 = normalize_word(word2)
        if not w1 or not w2:
            return 0.0

        if w1 == w2:
            return EXACT_SCORE

        w1_ocr = normalize_ocr_confusions(w1)
        w2_ocr = normalize_ocr_confusions(w2)
        if w1_ocr == w2_ocr:
            return EXACT_SCORE

        # Numbers are parsed from the raw text so "twenty-one" survives
        if are_number_equivalents(word1, word2):
            return EXACT_SCORE

        if self.tables.are_homophones(w1, w2):
            return HOMOPHONE_SCORE

        min_len = min(len(w1), len(w2))
        max_len = max(len(w1), len(w2))
        if min_len >= PREFIX_LEN and w1[:PREFIX_LEN] == w2[:PREFIX_LEN]:
            return PREFIX_BASE_SCORE + PREFIX_LENGTH_WEIGHT * (min_len / max_len)

        distance = min(levenshtein_distance(w1, w2), levenshtein_distance(w1_ocr, w2_ocr))
        score = 1.0 - distance / max_len
        if len(w1) == len(w2):
            score += SAME_LENGTH_BONUS
        return max(0.0, min(1.0, score))


_DEFAULT_SCORER = WordSimilarity()


def word_similarity(word1: str, word2: str) -> float:
    """Similarity of two words using the default lexical tables."""
    return _DEFAULT_SCORER.similarity(word1, word2)
