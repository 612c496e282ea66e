"""Data model for expected, spoken and aligned words."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..exceptions import InvalidInputError


class WordStatus(str, Enum):
    """Classification of one expected word after alignment."""

    CORRECT = "correct"
    MISREAD = "misread"
    SUBSTITUTED = "substituted"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class BoundingBox:
    """Word position on the source image, in pixels."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "BoundingBox":
        if not data:
            return cls()
        return cls(
            x=float(data.get("x", 0) or 0),
            y=float(data.get("y", 0) or 0),
            width=float(data.get("width", data.get("w", 0)) or 0),
            height=float(data.get("height", data.get("h", 0)) or 0),
        )

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class ExpectedWord:
    """A word of the printed passage as extracted by OCR.

    Attributes:
        text: Raw OCR text, punctuation included (used for natural-pause checks)
        bounding_box: Position of the word on the page image
    """
    text: str
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExpectedWord":
        text = data.get("text")
        if text is None:
            text = data.get("word")
        if text is None:
            raise InvalidInputError(f"OCR word has no text: {dict(data)!r}")
        return cls(text=str(text), bounding_box=BoundingBox.from_dict(data.get("boundingBox")))


@dataclass(frozen=True)
class SpokenWord:
    """A word of the ASR transcript.

    Attributes:
        text: Transcribed word
        start_time: Start timestamp in seconds
        end_time: End timestamp in seconds
        confidence: ASR confidence in 0..1
    """
    text: str
    start_time: float = 0.0
    end_time: float = 0.0
    confidence: float = 1.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpokenWord":
        # Handle both formats:
        # ASR service: {"word": "...", "startTime": ..., "endTime": ..., "confidence": ...}
        # Alternate:   {"value"|"text": "...", "start": ..., "end": ...}
        text = data.get("word") or data.get("value") or data.get("text")
        if text is None:
            raise InvalidInputError(f"ASR word has no text: {dict(data)!r}")
        start = data.get("startTime", data.get("start"))
        end = data.get("endTime", data.get("end"))
        confidence = data.get("confidence")
        return cls(
            text=str(text),
            start_time=float(start or 0.0),
            end_time=float(end if end is not None else start or 0.0),
            confidence=float(confidence) if confidence is not None else 1.0,
        )


def expected_words_from_text(text: str) -> List[ExpectedWord]:
    """Split a plain OCR full-text string into expected words with empty boxes.

    Example: "The cat, sat." -> [ExpectedWord("The"), ExpectedWord("cat,"), ExpectedWord("sat.")]
    """
    return [ExpectedWord(token) for token in re.split(r"\s+", text.strip()) if token]


def as_expected_words(items: Iterable[Union[ExpectedWord, Mapping[str, Any], str]]) -> List[ExpectedWord]:
    """Coerce OCR collaborator output (models, dicts or bare strings) to ExpectedWords."""
    words: List[ExpectedWord] = []
    for item in items:
        if isinstance(item, ExpectedWord):
            words.append(item)
        elif isinstance(item, str):
            words.append(ExpectedWord(item))
        else:
            words.append(ExpectedWord.from_dict(item))
    return words


def as_spoken_words(items: Iterable[Union[SpokenWord, Mapping[str, Any]]]) -> List[SpokenWord]:
    """Coerce ASR collaborator output (models or dicts) to SpokenWords."""
    return [item if isinstance(item, SpokenWord) else SpokenWord.from_dict(item) for item in items]


@dataclass(frozen=True)
class PassageRange:
    """Contiguous OCR sub-range the student was attempting to read (inclusive)."""

    first_index: int
    last_index: int
    matched_count: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "firstIndex": self.first_index,
            "lastIndex": self.last_index,
            "matchedCount": self.matched_count,
        }


@dataclass(frozen=True)
class AlignedWord:
    """One expected word of the detected passage and how it was read.

    Attributes:
        expected: Raw expected (OCR) text
        spoken: Spoken text matched to it, or None when skipped
        status: Correct, misread, substituted or skipped
        start_time: Start of the matched spoken word (0 when skipped)
        end_time: End of the matched spoken word (0 when skipped)
        confidence: ASR confidence of the matched spoken word (0 when skipped)
        hesitation: Significant pause before this word
        pause_duration: Silence before the matched spoken word, in seconds
        is_repeat: The matched spoken word repeats the one before it (stutter)
        is_self_correction: The student revised the previous spoken word into this one
        bounding_box: Position of the expected word on the page
    """
    expected: str
    spoken: Optional[str]
    status: WordStatus
    start_time: float = 0.0
    end_time: float = 0.0
    confidence: float = 0.0
    hesitation: bool = False
    pause_duration: float = 0.0
    is_repeat: bool = False
    is_self_correction: bool = False
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    @classmethod
    def skipped(cls, word: ExpectedWord) -> "AlignedWord":
        return cls(
            expected=word.text,
            spoken=None,
            status=WordStatus.SKIPPED,
            bounding_box=word.bounding_box,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "expected": self.expected,
            "spoken": self.spoken,
            "status": self.status.value,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "confidence": self.confidence,
            "hesitation": self.hesitation,
            "pauseDuration": self.pause_duration,
            "isRepeat": self.is_repeat,
            "isSelfCorrection": self.is_self_correction,
            "boundingBox": self.bounding_box.to_dict(),
        }


@dataclass(frozen=True)
class MatchingResult:
    """Aligned word list of one assessment plus its aggregate counts.

    Invariant: correct + skip + substitution + misread == len(words).
    """
    words: Tuple[AlignedWord, ...] = ()
    correct_count: int = 0
    skip_count: int = 0
    substitution_count: int = 0
    misread_count: int = 0
    hesitation_count: int = 0
    filler_word_count: int = 0
    repeat_count: int = 0
    self_correction_count: int = 0
    passage_range: Optional[PassageRange] = None

    @property
    def error_count(self) -> int:
        return self.skip_count + self.substitution_count + self.misread_count

    @classmethod
    def from_words(
        cls,
        words: List[AlignedWord],
        filler_word_count: int = 0,
        passage_range: Optional[PassageRange] = None,
    ) -> "MatchingResult":
        """Build a result whose counts are derived from the aligned words."""
        by_status = {status: 0 for status in WordStatus}
        for word in words:
            by_status[word.status] += 1
        return cls(
            words=tuple(words),
            correct_count=by_status[WordStatus.CORRECT],
            skip_count=by_status[WordStatus.SKIPPED],
            substitution_count=by_status[WordStatus.SUBSTITUTED],
            misread_count=by_status[WordStatus.MISREAD],
            hesitation_count=sum(1 for w in words if w.hesitation),
            filler_word_count=filler_word_count,
            repeat_count=sum(1 for w in words if w.is_repeat),
            self_correction_count=sum(1 for w in words if w.is_self_correction),
            passage_range=passage_range,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "words": [w.to_dict() for w in self.words],
            "correctCount": self.correct_count,
            "errorCount": self.error_count,
            "skipCount": self.skip_count,
            "substitutionCount": self.substitution_count,
            "misreadCount": self.misread_count,
            "hesitationCount": self.hesitation_count,
            "fillerWordCount": self.filler_word_count,
            "repeatCount": self.repeat_count,
            "selfCorrectionCount": self.self_correction_count,
            "passageRange": self.passage_range.to_dict() if self.passage_range else None,
        }
