"""Static phonetic-equivalence tables used by the similarity scorer.

Entries are groups of normalized words that sound alike when read aloud: true
homophones, common name spelling confusions, abbreviations read in full and
contractions as they appear once normalized (apostrophe dropped by OCR, or
expanded by the normalizer: "they're" -> "they are", "it's" -> "it").
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Sequence, Set

HOMOPHONE_GROUPS: Sequence[Sequence[str]] = (
    # Function words
    ("there", "their", "theyre", "they are"),
    ("to", "too", "two"),
    ("your", "youre", "you are"),
    ("its", "it"),
    ("whose", "whos", "who"),
    ("were", "we are"),
    ("where", "wear", "ware"),
    ("for", "four", "fore"),
    ("by", "buy", "bye"),
    ("one", "won"),
    ("eight", "ate"),
    ("no", "know"),
    ("new", "knew", "gnu"),
    ("not", "knot"),
    ("our", "hour"),
    ("hear", "here"),
    ("which", "witch"),
    ("whether", "weather"),
    ("than", "then"),
    ("would", "wood"),
    ("i", "eye", "aye"),
    ("be", "bee"),
    ("see", "sea"),
    ("so", "sew", "sow"),
    ("or", "oar", "ore"),
    ("in", "inn"),
    ("all", "awl"),
    ("some", "sum"),
    ("son", "sun"),
    ("through", "threw"),
    ("way", "weigh", "whey"),
    ("wait", "weight"),
    ("week", "weak"),
    ("right", "write", "rite"),
    ("road", "rode", "rowed"),
    ("blue", "blew"),
    ("red", "read"),
    ("made", "maid"),
    ("meet", "meat"),
    ("night", "knight"),
    ("peace", "piece"),
    ("plane", "plain"),
    ("sail", "sale"),
    ("tail", "tale"),
    ("flower", "flour"),
    ("pair", "pear", "pare"),
    ("bare", "bear"),
    ("dear", "deer"),
    ("hair", "hare"),
    ("hole", "whole"),
    ("mail", "male"),
    ("wont", "wo not", "will not"),
    ("cant", "ca not", "can not", "cannot"),
    ("dont", "do not"),
    ("didnt", "did not"),
    ("isnt", "is not"),
    ("wasnt", "was not"),
    ("im", "i am"),
    ("ill", "i will"),
    ("ive", "i have"),
    ("id", "i would"),
    ("lets", "let"),
    ("thats", "that"),
    ("whats", "what"),
    # Abbreviations read in full
    ("mr", "mister"),
    ("mrs", "missus", "misses"),
    ("dr", "doctor"),
    ("st", "street", "saint"),
    ("ok", "okay"),
    # Names
    ("jon", "john"),
    ("sean", "shawn", "shaun"),
    ("kathy", "cathy"),
    ("katie", "katy", "kate"),
    ("steven", "stephen"),
    ("ann", "anne"),
    ("mary", "marry", "merry"),
    ("sara", "sarah"),
    ("eric", "erik"),
    ("carl", "karl"),
    ("allan", "allen", "alan"),
    ("brian", "bryan"),
    ("jeff", "geoff"),
    ("philip", "phillip"),
    ("mark", "marc"),
    ("zoe", "zoey"),
)


def _build_index(groups: Iterable[Iterable[str]]) -> Dict[str, Set[str]]:
    index: Dict[str, Set[str]] = {}
    for group in groups:
        members = {w.lower().strip() for w in group if w and w.strip()}
        for word in members:
            index.setdefault(word, set()).update(members - {word})
    return index


@dataclass(frozen=True)
class LexicalTables:
    """Read-only lexical data injected into the similarity scorer.

    Attributes:
        homophones: Normalized word -> frozenset of equivalent normalized words
    """
    homophones: Mapping[str, FrozenSet[str]]

    @classmethod
    def from_groups(cls, groups: Iterable[Iterable[str]]) -> "LexicalTables":
        index = _build_index(groups)
        return cls(MappingProxyType({w: frozenset(v) for w, v in index.items()}))

    @classmethod
    def default(cls) -> "LexicalTables":
        """Shared tables built from the static groups at import time."""
        return DEFAULT_TABLES

    def extended(self, groups: Iterable[Iterable[str]]) -> "LexicalTables":
        """Return new tables with extra equivalence groups merged in."""
        index: Dict[str, Set[str]] = {w: set(v) for w, v in self.homophones.items()}
        for word, variants in _build_index(groups).items():
            index.setdefault(word, set()).update(variants)
        return LexicalTables(MappingProxyType({w: frozenset(v) for w, v in index.items()}))

    def are_homophones(self, word1: str, word2: str) -> bool:
        variants: Optional[FrozenSet[str]] = self.homophones.get(word1)
        return bool(variants) and word2 in variants


DEFAULT_TABLES = LexicalTables.from_groups(HOMOPHONE_GROUPS)
