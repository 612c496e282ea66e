"""Passage boundary detection: which OCR words was the student reading?

A photographed page often holds more than the assigned passage (headings,
page numbers, a neighbouring paragraph), and students may start or stop
mid-page. The detector finds the contiguous OCR range that best explains the
transcript.
"""
from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from ..models.aligned_word import ExpectedWord, PassageRange, SpokenWord
from .normalizer import is_filler_word, normalize_word
from .rules import (
    BOUNDARY_GAP_PENALTY,
    BOUNDARY_MATCH_THRESHOLD,
    BOUNDARY_MIN_MATCHES,
    BOUNDARY_SKIP_PENALTY,
    BOUNDARY_SNAP_WINDOW,
    CORRECT_THRESHOLD,
)
from .similarity import WordSimilarity

logger = logging.getLogger(__name__)

OcrInput = Union[ExpectedWord, str]
SpokenInput = Union[SpokenWord, str]


@dataclass(frozen=True)
class _RangeState:
    score: float
    matched: int
    last_ocr: int
    first_ocr: int


def _text(word: Union[OcrInput, SpokenInput]) -> str:
    return word if isinstance(word, str) else word.text


def build_similarity_matrix(
    spoken: Sequence[str], ocr: Sequence[str], scorer: WordSimilarity
) -> np.ndarray:
    """Similarity of every spoken word (rows) against every OCR word (columns).

    Each distinct (spoken, OCR) text pair is scored once; repeated words such
    as "the" reuse the same cell.
    """
    if not spoken or not ocr:
        return np.zeros((len(spoken), len(ocr)), dtype=float)
    spoken_keys, spoken_index = np.unique(np.asarray(spoken, dtype=str), return_inverse=True)
    ocr_keys, ocr_index = np.unique(np.asarray(ocr, dtype=str), return_inverse=True)
    distinct = np.array(
        [[scorer.similarity(str(s), str(o)) for o in ocr_keys] for s in spoken_keys],
        dtype=float,
    )
    return distinct[np.ix_(spoken_index.ravel(), ocr_index.ravel())]


def _best_from_start(
    similarities: List[List[float]], candidates: List[List[int]], start: int
) -> _RangeState:
    """Forward DP over spoken words for OCR candidates at or after `start`.

    `candidates[s]` lists, in ascending order, the OCR columns spoken word `s`
    matches at or above the threshold.
    """
    initial = _RangeState(score=0.0, matched=0, last_ocr=start - 1, first_ocr=-1)
    dp: List[_RangeState] = [initial] * (len(similarities) + 1)

    for s, row in enumerate(similarities):
        prev = dp[s]
        columns = candidates[s]
        for o in columns[bisect_right(columns, prev.last_ocr):]:
            skipped = o - prev.last_ocr - 1
            score = prev.score + row[o] - skipped * BOUNDARY_SKIP_PENALTY
            if score > dp[s + 1].score:
                dp[s + 1] = _RangeState(
                    score=score,
                    matched=prev.matched + 1,
                    last_ocr=o,
                    first_ocr=o if prev.first_ocr == -1 else prev.first_ocr,
                )

        # Leave this spoken word unmatched
        gap_score = prev.score - BOUNDARY_GAP_PENALTY
        if gap_score > dp[s + 1].score:
            dp[s + 1] = _RangeState(gap_score, prev.matched, prev.last_ocr, prev.first_ocr)

    return dp[-1]


def find_passage_range(
    ocr_words: Sequence[OcrInput],
    spoken_words: Sequence[SpokenInput],
    scorer: Optional[WordSimilarity] = None,
    *,
    match_threshold: float = BOUNDARY_MATCH_THRESHOLD,
    min_matches: int = BOUNDARY_MIN_MATCHES,
    similarity_matrix: Optional[np.ndarray] = None,
) -> PassageRange:
    """Find the OCR sub-range the student was attempting to read.

    Every OCR offset is tried as a starting point; from each, spoken words are
    matched in order against later OCR words (similarity >= 0.55), paying 0.3
    per OCR word jumped over and 0.4 per spoken word left unmatched. The
    highest-scoring start with at least two matches wins.

    Args:
        ocr_words: Full OCR word list of the page (models or raw strings)
        spoken_words: Spoken words, fillers included (models or raw strings)
        scorer: Similarity scorer (default lexical tables if None)
        match_threshold: Minimum similarity for a spoken/OCR match
        min_matches: Matches required before a range is trusted
        similarity_matrix: Precomputed `build_similarity_matrix` output with
            one row per entry of `spoken_words`; built here if None

    Returns:
        PassageRange with inclusive OCR indices; the full range with
        matched_count=0 when nothing qualifies.
    """
    scorer = scorer or WordSimilarity()
    fallback = PassageRange(first_index=0, last_index=len(ocr_words) - 1, matched_count=0)

    texts = [_text(w) for w in spoken_words]
    rows = [s for s, w in enumerate(texts) if not is_filler_word(w) and normalize_word(w)]
    ocr = [_text(w) for w in ocr_words]
    if not rows or not ocr:
        return fallback

    if similarity_matrix is None:
        matrix = build_similarity_matrix([texts[s] for s in rows], ocr, scorer)
    else:
        matrix = similarity_matrix[rows]
    similarities = matrix.tolist()
    candidates = [np.flatnonzero(row >= match_threshold).tolist() for row in matrix]

    best: Optional[_RangeState] = None
    for start in range(len(ocr)):
        final = _best_from_start(similarities, candidates, start)
        if final.matched < min_matches:
            continue
        if final.score > (best.score if best else 0.0):
            best = final

    if best is None:
        logger.debug("Passage detection: no clear match found, using full OCR text")
        return fallback

    logger.debug(
        "Passage detection: words %d to %d (%d matched)",
        best.first_ocr, best.last_ocr, best.matched,
    )
    return PassageRange(first_index=best.first_ocr, last_index=best.last_ocr, matched_count=best.matched)


def snap_passage_range(
    passage: PassageRange,
    ocr_words: Sequence[OcrInput],
    spoken_words: Sequence[SpokenInput],
    scorer: Optional[WordSimilarity] = None,
    *,
    window: int = BOUNDARY_SNAP_WINDOW,
    exact_threshold: float = CORRECT_THRESHOLD,
) -> PassageRange:
    """Move a range edge onto a nearby exact match of the first/last spoken word.

    The range DP may end a passage on a look-alike ("sat" matched to "cat")
    rather than pay the skip penalty to reach the word actually read one
    position later. When the edge OCR word is not an exact match for the
    edge spoken word, the nearest exact match within `window` OCR words
    outside the range becomes the new edge. The alignment then reports the
    words in between as skipped. Fallback ranges are returned unchanged.
    """
    if passage.matched_count == 0:
        return passage
    scorer = scorer or WordSimilarity()
    spoken = [_text(w) for w in spoken_words]
    spoken = [w for w in spoken if not is_filler_word(w) and normalize_word(w)]
    ocr = [_text(w) for w in ocr_words]
    if not spoken:
        return passage

    first, last = passage.first_index, passage.last_index

    if scorer.similarity(spoken[-1], ocr[last]) < exact_threshold:
        for o in range(last + 1, min(len(ocr), last + 1 + window)):
            if scorer.similarity(spoken[-1], ocr[o]) >= exact_threshold:
                last = o
                break

    if scorer.similarity(spoken[0], ocr[first]) < exact_threshold:
        for o in range(first - 1, max(-1, first - 1 - window), -1):
            if scorer.similarity(spoken[0], ocr[o]) >= exact_threshold:
                first = o
                break

    if (first, last) != (passage.first_index, passage.last_index):
        logger.debug(
            "Passage edges snapped from %d-%d to %d-%d",
            passage.first_index, passage.last_index, first, last,
        )
    return PassageRange(first_index=first, last_index=last, matched_count=passage.matched_count)
