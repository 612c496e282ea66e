"""Similarity, boundary detection and alignment thresholds."""
from __future__ import annotations

# Similarity scores for the equivalence rules
EXACT_SCORE = 1.0
HOMOPHONE_SCORE = 0.95

# Shared-prefix heuristic: 0.6 + 0.35 * (shorter / longer)
PREFIX_LEN = 3
PREFIX_BASE_SCORE = 0.6
PREFIX_LENGTH_WEIGHT = 0.35

# Bonus added to the edit-distance score when both words have the same length
SAME_LENGTH_BONUS = 0.1

# Passage boundary detection
BOUNDARY_MATCH_THRESHOLD = 0.55  # minimum similarity for a spoken/OCR match
BOUNDARY_SKIP_PENALTY = 0.3      # per OCR word jumped over
BOUNDARY_GAP_PENALTY = 0.4       # per spoken word left unmatched
BOUNDARY_MIN_MATCHES = 2
BOUNDARY_SNAP_WINDOW = 2         # OCR words searched past a range edge for an exact match

# Alignment DP: similarity thresholds for each match status, then score deltas
CORRECT_THRESHOLD = 0.95
MISREAD_THRESHOLD = 0.70
SUBSTITUTION_THRESHOLD = 0.40

CORRECT_SCORE = 1.0
MISREAD_SCORE = 0.5
SUBSTITUTION_SCORE = 0.2
MISMATCH_SCORE = -0.5
SKIP_PENALTY = -1.0    # expected word not spoken
EXTRA_PENALTY = -0.3   # spoken word with no expected counterpart
