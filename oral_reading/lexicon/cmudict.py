"""CMU Pronouncing Dictionary homophone discovery via NLTK."""
from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Optional, Set, Tuple

from nltk.corpus import cmudict as nltk_cmudict

from ..alignment.normalizer import normalize_word

logger = logging.getLogger(__name__)

CmuDict = Dict[str, List[List[str]]]

# Global cache for loaded CMUdict
_CMUDICT_CACHE: Optional[CmuDict] = None


def load_cmudict() -> CmuDict:
    """Load the CMU Pronouncing Dictionary via NLTK.

    Caches the dictionary after first load.

    Returns:
        Dict mapping lowercase words to lists of ARPAbet pronunciations.
        Example: {"knight": [["N", "AY1", "T"]]}

    Raises:
        LookupError: If the cmudict corpus is not downloaded (with instructions)
    """
    global _CMUDICT_CACHE

    if _CMUDICT_CACHE is not None:
        return _CMUDICT_CACHE

    try:
        _CMUDICT_CACHE = nltk_cmudict.dict()
    except LookupError:
        raise LookupError(
            "CMUdict is not downloaded. Run:\n"
            "  python -c \"import nltk; nltk.download('cmudict')\""
        )
    return _CMUDICT_CACHE


def strip_stress(phones: Iterable[str]) -> Tuple[str, ...]:
    """Drop ARPAbet stress digits: ["N", "AY1", "T"] -> ("N", "AY", "T")."""
    return tuple(re.sub(r"\d", "", p) for p in phones)


def has_stressed_vowel(phones: Iterable[str]) -> bool:
    """True when some vowel carries primary or secondary stress.

    Weak forms of function words ("are" as ER0, "for" as F ER0) have none.
    """
    return any(p[-1] in "12" for p in phones)


def find_cmudict_homophones(
    words: Iterable[str],
    cmu_dict: Optional[CmuDict] = None,
) -> List[Tuple[str, ...]]:
    """Group the given vocabulary into sets of words that share a pronunciation.

    Only words present in the dictionary take part; each word is looked up
    lowercase with punctuation other than apostrophes removed. Every stressed
    pronunciation of a word is considered, so "read" joins both "reed" and
    "red". Fully unstressed weak forms are ignored, otherwise "are" and "or"
    would both be ER0. Group members are stored in matching form, so "we'll"
    appears as "we will".

    Args:
        words: Vocabulary of one assessment (passage and transcript words)
        cmu_dict: Optional pre-loaded CMUdict (loads via NLTK if None)

    Returns:
        Sorted tuples of two or more words, one per shared pronunciation.
    """
    if cmu_dict is None:
        cmu_dict = load_cmudict()

    by_pronunciation: Dict[Tuple[str, ...], Set[str]] = {}
    for raw in words:
        word = re.sub(r"[^a-z']", "", raw.lower())
        if not word:
            continue
        member = normalize_word(word)
        for phones in cmu_dict.get(word, []):
            if not has_stressed_vowel(phones):
                continue
            by_pronunciation.setdefault(strip_stress(phones), set()).add(member)

    groups = sorted({tuple(sorted(ws)) for ws in by_pronunciation.values() if len(ws) > 1})
    logger.debug("CMUdict homophone groups: %s", groups)
    return groups
