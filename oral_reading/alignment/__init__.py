"""Similarity scoring, passage detection and alignment of OCR text to ASR output."""
from .aligner import align_words
from .boundary import find_passage_range, snap_passage_range
from .normalizer import is_filler_word, normalize_ocr_confusions, normalize_word
from .similarity import WordSimilarity, word_similarity

__all__ = [
    "align_words",
    "find_passage_range",
    "snap_passage_range",
    "is_filler_word",
    "normalize_ocr_confusions",
    "normalize_word",
    "WordSimilarity",
    "word_similarity",
]
