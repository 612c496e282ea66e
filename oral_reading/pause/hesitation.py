"""Pause measurement and hesitation detection between spoken words."""
from __future__ import annotations

from typing import List, Sequence, Set

from ..models.aligned_word import SpokenWord
from .rules import HESITATION_THRESHOLD


def measure_pauses(spoken_words: Sequence[SpokenWord]) -> List[float]:
    """Silence before each spoken word, in seconds.

    The first word has no pause. Overlapping timestamps are clamped to 0.
    """
    pauses: List[float] = []
    for i, word in enumerate(spoken_words):
        if i == 0:
            pauses.append(0.0)
            continue
        pauses.append(max(0.0, word.start_time - spoken_words[i - 1].end_time))
    return pauses


def detect_hesitations(
    pause_durations: Sequence[float],
    threshold: float = HESITATION_THRESHOLD,
) -> Set[int]:
    """Indices of spoken words preceded by a pause longer than `threshold`."""
    return {i for i, pause in enumerate(pause_durations) if pause > threshold}
