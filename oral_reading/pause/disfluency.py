"""Disfluency detection over the spoken word sequence.

Runs independently of the alignment: fillers are counted and removed first,
then pauses, stutter-repeats and self-corrections are flagged by index into
the filler-free sequence.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Set, Tuple

from ..alignment.normalizer import is_filler_word, normalize_word, shares_prefix
from ..alignment.similarity import WordSimilarity
from ..models.aligned_word import SpokenWord
from .hesitation import detect_hesitations, measure_pauses
from .rules import (
    ABANDONED_PREFIX_MAX_LEN,
    HESITATION_THRESHOLD,
    MIN_PREFIX_WORD_LEN,
    QUICK_SUCCESSION_GAP,
    QUICK_SUCCESSION_SIMILARITY,
    REPEAT_SIMILARITY,
    SELF_CORRECTION_MIN_SIMILARITY,
)

logger = logging.getLogger(__name__)

REPEAT = "repeat"
SELF_CORRECTION = "self_correction"


@dataclass(frozen=True)
class DisfluencyReport:
    """Disfluency flags for one transcript, indexed into `spoken_words`.

    Attributes:
        spoken_words: Transcript with filler words removed
        filler_word_count: Number of fillers removed
        pause_durations: Silence before each word of `spoken_words`
        hesitation_indices: Words preceded by a pause above the threshold
        repeat_indices: Later word of a stutter pair ("the the")
        self_correction_indices: Later word of a revised attempt ("th three")
    """
    spoken_words: Tuple[SpokenWord, ...] = ()
    filler_word_count: int = 0
    pause_durations: Tuple[float, ...] = ()
    hesitation_indices: FrozenSet[int] = field(default_factory=frozenset)
    repeat_indices: FrozenSet[int] = field(default_factory=frozenset)
    self_correction_indices: FrozenSet[int] = field(default_factory=frozenset)


def remove_filler_words(spoken_words: Sequence[SpokenWord]) -> Tuple[List[SpokenWord], int]:
    """Split a transcript into its non-filler words and the filler count."""
    clean = [w for w in spoken_words if not is_filler_word(w.text)]
    return clean, len(spoken_words) - len(clean)


def classify_pair(
    previous: SpokenWord,
    current: SpokenWord,
    scorer: WordSimilarity,
) -> Optional[str]:
    """Classify the later of two consecutive spoken words.

    Rules are checked in this order and the first that fires decides, so a
    word is never both a repeat and a self-correction:

    1. Same normalized word -> repeat.
    2. Both words 2+ characters and sharing their opening letters:
       similarity >= 0.85 -> repeat; 0.4 <= similarity < 0.85 -> self-correction.
    3. Earlier word of at most 3 characters is a literal prefix of the later
       one ("th" -> "three") -> self-correction.
    4. Later word follows within 0.2 s and 0.3 <= similarity < 0.7 ->
       self-correction.

    Returns:
        REPEAT, SELF_CORRECTION or None
    """
    prev_text = normalize_word(previous.text)
    curr_text = normalize_word(current.text)
    if not prev_text or not curr_text:
        return None

    if prev_text == curr_text:
        return REPEAT

    similarity = scorer.similarity(prev_text, curr_text)
    long_enough = len(prev_text) >= MIN_PREFIX_WORD_LEN and len(curr_text) >= MIN_PREFIX_WORD_LEN

    if long_enough and shares_prefix(prev_text, curr_text):
        if similarity >= REPEAT_SIMILARITY:
            return REPEAT
        if similarity >= SELF_CORRECTION_MIN_SIMILARITY:
            return SELF_CORRECTION

    if long_enough and len(prev_text) <= ABANDONED_PREFIX_MAX_LEN and curr_text.startswith(prev_text):
        return SELF_CORRECTION

    gap = current.start_time - previous.end_time
    low, high = QUICK_SUCCESSION_SIMILARITY
    if 0 <= gap < QUICK_SUCCESSION_GAP and low <= similarity < high:
        return SELF_CORRECTION

    return None


def detect_repeats_and_self_corrections(
    spoken_words: Sequence[SpokenWord],
    scorer: Optional[WordSimilarity] = None,
) -> Tuple[Set[int], Set[int]]:
    """Flag stutter-repeats and self-corrections in a filler-free transcript.

    Only the later word of each consecutive pair is flagged.

    Returns:
        (repeat indices, self-correction indices), disjoint
    """
    scorer = scorer or WordSimilarity()
    repeats: Set[int] = set()
    corrections: Set[int] = set()

    for i in range(1, len(spoken_words)):
        kind = classify_pair(spoken_words[i - 1], spoken_words[i], scorer)
        if kind == REPEAT:
            repeats.add(i)
        elif kind == SELF_CORRECTION:
            corrections.add(i)
            logger.debug(
                "Self-correction detected: %r -> %r",
                spoken_words[i - 1].text, spoken_words[i].text,
            )

    return repeats, corrections


def detect_disfluencies(
    spoken_words: Sequence[SpokenWord],
    scorer: Optional[WordSimilarity] = None,
    *,
    hesitation_threshold: float = HESITATION_THRESHOLD,
) -> DisfluencyReport:
    """Remove fillers and flag hesitations, repeats and self-corrections.

    Args:
        spoken_words: Raw transcript in time order
        scorer: Similarity scorer (default lexical tables if None)
        hesitation_threshold: Pause in seconds above which a word is a hesitation

    Returns:
        DisfluencyReport whose indices refer to the filler-free transcript
    """
    clean, filler_count = remove_filler_words(spoken_words)
    pauses = measure_pauses(clean)
    hesitations = detect_hesitations(pauses, hesitation_threshold)
    repeats, corrections = detect_repeats_and_self_corrections(clean, scorer)

    logger.debug(
        "Detected %d filler words, %d hesitations, %d repeats, %d self-corrections",
        filler_count, len(hesitations), len(repeats), len(corrections),
    )
    return DisfluencyReport(
        spoken_words=tuple(clean),
        filler_word_count=filler_count,
        pause_durations=tuple(pauses),
        hesitation_indices=frozenset(hesitations),
        repeat_indices=frozenset(repeats),
        self_correction_indices=frozenset(corrections),
    )
