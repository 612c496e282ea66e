"""Word-level matching for oral reading assessment."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ..alignment.aligner import align_words
from ..alignment.boundary import build_similarity_matrix, find_passage_range, snap_passage_range
from ..alignment.similarity import WordSimilarity
from ..lexicon.homophones import LexicalTables
from ..models.aligned_word import (
    ExpectedWord,
    MatchingResult,
    SpokenWord,
    as_expected_words,
    as_spoken_words,
)
from ..pause.disfluency import detect_disfluencies
from ..pause.rules import HESITATION_THRESHOLD

logger = logging.getLogger(__name__)


def detect_and_align(
    ocr_words: Sequence[Union[ExpectedWord, Mapping[str, Any], str]],
    spoken_words: Sequence[Union[SpokenWord, Mapping[str, Any]]],
    *,
    tables: Optional[LexicalTables] = None,
    hesitation_threshold: float = HESITATION_THRESHOLD,
) -> MatchingResult:
    """Core alignment output used by the metrics and pattern components.

    Steps:
      1. Count and remove filler words (um, uh, ...)
      2. Flag hesitations, stutter-repeats and self-corrections on the clean transcript
      3. Score every clean spoken word against every OCR word once
      4. Detect which OCR words the student was reading (passage boundaries),
         snapping the edges onto nearby exact matches
      5. Align that OCR slice against the clean transcript, reusing the scores

    Notes:
      - Zero OCR words or no non-filler spoken words give an empty result; the
        passage cannot be located without spoken words to seed the matching
      - Hesitation, repeat and self-correction counts are taken from the final
        alignment, so flags on extra (unaligned) spoken words are not counted

    Args:
        ocr_words: Full OCR word list of the page (models, dicts or strings)
        spoken_words: ASR word list in time order (models or dicts)
        tables: Lexical tables for the similarity scorer (defaults if None)
        hesitation_threshold: Pause in seconds above which a word is a hesitation

    Returns:
        MatchingResult with one AlignedWord per word of the detected passage
    """
    expected = as_expected_words(ocr_words)
    spoken = as_spoken_words(spoken_words)
    scorer = WordSimilarity(tables)

    report = detect_disfluencies(spoken, scorer, hesitation_threshold=hesitation_threshold)
    clean = list(report.spoken_words)

    if not expected or not clean:
        return MatchingResult(filler_word_count=report.filler_word_count)

    matrix = build_similarity_matrix([w.text for w in clean], [w.text for w in expected], scorer)
    passage = find_passage_range(expected, clean, scorer, similarity_matrix=matrix)
    passage = snap_passage_range(passage, expected, clean, scorer)
    passage_words = expected[passage.first_index: passage.last_index + 1]
    logger.debug(
        "Detected passage: %d words (OCR indices %d-%d), first=%r last=%r",
        len(passage_words), passage.first_index, passage.last_index,
        passage_words[0].text, passage_words[-1].text,
    )

    result = align_words(
        passage_words,
        clean,
        scorer=scorer,
        disfluency=report,
        filler_word_count=report.filler_word_count,
        passage_range=passage,
        similarities=matrix[:, passage.first_index: passage.last_index + 1].T.tolist(),
    )
    logger.debug(
        "Matching complete: %d correct, %d errors", result.correct_count, result.error_count
    )
    return result
