"""Dynamic-programming alignment of expected passage words to spoken words."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

from ..models.aligned_word import (
    AlignedWord,
    ExpectedWord,
    MatchingResult,
    PassageRange,
    SpokenWord,
    WordStatus,
)
from .normalizer import ends_with_natural_pause
from .rules import (
    CORRECT_SCORE,
    CORRECT_THRESHOLD,
    EXTRA_PENALTY,
    MISMATCH_SCORE,
    MISREAD_SCORE,
    MISREAD_THRESHOLD,
    SKIP_PENALTY,
    SUBSTITUTION_SCORE,
    SUBSTITUTION_THRESHOLD,
)
from .similarity import WordSimilarity

if TYPE_CHECKING:
    from ..pause.disfluency import DisfluencyReport

logger = logging.getLogger(__name__)

# Backtracking tag for a spoken word with no expected counterpart
EXTRA = "extra"

Step = Tuple[int, int, Union[WordStatus, str, None]]


def classify_match(similarity: float) -> Tuple[float, WordStatus]:
    """Score delta and status for matching an expected word with a spoken word."""
    if similarity >= CORRECT_THRESHOLD:
        return CORRECT_SCORE, WordStatus.CORRECT
    if similarity >= MISREAD_THRESHOLD:
        return MISREAD_SCORE, WordStatus.MISREAD
    if similarity >= SUBSTITUTION_THRESHOLD:
        return SUBSTITUTION_SCORE, WordStatus.SUBSTITUTED
    return MISMATCH_SCORE, WordStatus.SUBSTITUTED


def _as_expected(word: Union[ExpectedWord, str]) -> ExpectedWord:
    return ExpectedWord(word) if isinstance(word, str) else word


def fill_alignment_table(
    expected: Sequence[ExpectedWord],
    spoken: Sequence[SpokenWord],
    scorer: WordSimilarity,
    similarities: Optional[Sequence[Sequence[float]]] = None,
) -> Tuple[List[List[float]], List[List[Step]]]:
    """Fill the (m+1) x (n+1) score table and its parent pointers.

    dp[i][j] is the best score aligning expected[:i] with spoken[:j]. Cells
    are relaxed in row-major order and each transition only replaces a
    strictly lower score, so on ties Match beats Skip beats Extra.
    `similarities[i][j]`, when given, replaces scoring expected[i] against
    spoken[j].
    """
    m, n = len(expected), len(spoken)
    dp = [[-math.inf] * (n + 1) for _ in range(m + 1)]
    parent: List[List[Step]] = [[(-1, -1, None)] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = 0.0

    for i in range(m + 1):
        for j in range(n + 1):
            score = dp[i][j]
            if score == -math.inf:
                continue

            # Match expected[i] with spoken[j]
            if i < m and j < n:
                if similarities is None:
                    similarity = scorer.similarity(expected[i].text, spoken[j].text)
                else:
                    similarity = similarities[i][j]
                delta, status = classify_match(similarity)
                if score + delta > dp[i + 1][j + 1]:
                    dp[i + 1][j + 1] = score + delta
                    parent[i + 1][j + 1] = (i, j, status)

            # Expected word not spoken
            if i < m and score + SKIP_PENALTY > dp[i + 1][j]:
                dp[i + 1][j] = score + SKIP_PENALTY
                parent[i + 1][j] = (i, j, WordStatus.SKIPPED)

            # Extra spoken word, dropped from the output
            if j < n and score + EXTRA_PENALTY > dp[i][j + 1]:
                dp[i][j + 1] = score + EXTRA_PENALTY
                parent[i][j + 1] = (i, j, EXTRA)

    return dp, parent


def align_words(
    expected: Sequence[Union[ExpectedWord, str]],
    spoken: Sequence[SpokenWord],
    *,
    scorer: Optional[WordSimilarity] = None,
    disfluency: Optional["DisfluencyReport"] = None,
    filler_word_count: int = 0,
    passage_range: Optional[PassageRange] = None,
    similarities: Optional[Sequence[Sequence[float]]] = None,
) -> MatchingResult:
    """Align expected passage words to filler-free spoken words.

    Each expected word ends up correct, misread, substituted or skipped; spoken
    words with no expected counterpart are dropped. Matched words carry the
    spoken word's timing and confidence plus the disfluency flags recorded for
    that spoken index. A hesitation is not reported when the expected word
    before it ends in natural-pause punctuation.

    Args:
        expected: Expected words of the detected passage, in reading order
        spoken: Spoken words with fillers already removed
        scorer: Similarity scorer (default lexical tables if None)
        disfluency: Pause, repeat and self-correction flags indexed like `spoken`;
            no flags are attached when None
        filler_word_count: Fillers removed before alignment, carried into the result
        passage_range: OCR range `expected` was sliced from, carried into the result
        similarities: Precomputed expected x spoken similarities; scored with
            `scorer` if None

    Returns:
        MatchingResult with one AlignedWord per expected word
    """
    expected_words = [_as_expected(w) for w in expected]
    scorer = scorer or WordSimilarity()

    if not expected_words:
        return MatchingResult(filler_word_count=filler_word_count, passage_range=passage_range)

    _, parent = fill_alignment_table(expected_words, spoken, scorer, similarities)

    alignment: List[AlignedWord] = []
    i, j = len(expected_words), len(spoken)
    while i > 0 or j > 0:
        pi, pj, tag = parent[i][j]
        if tag is None:
            break

        if tag == EXTRA:
            j = pj
            continue

        if tag is WordStatus.SKIPPED:
            alignment.append(AlignedWord.skipped(expected_words[pi]))
            i = pi
            continue

        spoken_word = spoken[pj]
        hesitation = False
        pause_duration = 0.0
        is_repeat = False
        is_self_correction = False
        if disfluency is not None:
            hesitation = pj in disfluency.hesitation_indices
            pause_duration = disfluency.pause_durations[pj]
            is_repeat = pj in disfluency.repeat_indices
            is_self_correction = pj in disfluency.self_correction_indices

        if hesitation and pi > 0 and ends_with_natural_pause(expected_words[pi - 1].text):
            logger.debug(
                "Filtered hesitation after punctuation: %r -> %r",
                expected_words[pi - 1].text, expected_words[pi].text,
            )
            hesitation = False

        alignment.append(
            AlignedWord(
                expected=expected_words[pi].text,
                spoken=spoken_word.text,
                status=tag,  # type: ignore[arg-type]
                start_time=spoken_word.start_time,
                end_time=spoken_word.end_time,
                confidence=spoken_word.confidence,
                hesitation=hesitation,
                pause_duration=pause_duration,
                is_repeat=is_repeat,
                is_self_correction=is_self_correction,
                bounding_box=expected_words[pi].bounding_box,
            )
        )
        i, j = pi, pj

    alignment.reverse()
    return MatchingResult.from_words(alignment, filler_word_count, passage_range)
