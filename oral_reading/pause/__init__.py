"""Disfluency detection: fillers, hesitations, stutter-repeats and self-corrections."""
from .disfluency import (
    DisfluencyReport,
    classify_pair,
    detect_disfluencies,
    detect_repeats_and_self_corrections,
    remove_filler_words,
)
from .hesitation import detect_hesitations, measure_pauses
from .rules import (
    FILLER_WORDS,
    HESITATION_THRESHOLD,
    NATURAL_PAUSE_PUNCTUATION,
    QUICK_SUCCESSION_GAP,
    REPEAT_SIMILARITY,
)

__all__ = [
    "DisfluencyReport",
    "classify_pair",
    "detect_disfluencies",
    "detect_repeats_and_self_corrections",
    "remove_filler_words",
    "detect_hesitations",
    "measure_pauses",
    "FILLER_WORDS",
    "HESITATION_THRESHOLD",
    "NATURAL_PAUSE_PUNCTUATION",
    "QUICK_SUCCESSION_GAP",
    "REPEAT_SIMILARITY",
]
