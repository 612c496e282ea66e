"""Word-level matching for oral reading assessment."""
from .word_level_matcher import detect_and_align

__all__ = ["detect_and_align"]
