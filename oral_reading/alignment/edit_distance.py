"""Edit distance between word strings."""
from __future__ import annotations


def levenshtein_distance(s1: str, s2: str) -> int:
    """Classic Levenshtein distance (insert, delete, substitute all cost 1).

    Uses two rolling rows of the DP table.
    """
    if s1 == s2:
        return 0
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    prev = list(range(len(s2) + 1))
    for i in range(1, len(s1) + 1):
        curr = [i] + [0] * len(s2)
        for j in range(1, len(s2) + 1):
            if s1[i - 1] == s2[j - 1]:
                curr[j] = prev[j - 1]
            else:
                curr[j] = 1 + min(prev[j], curr[j - 1], prev[j - 1])
        prev = curr
    return prev[len(s2)]
