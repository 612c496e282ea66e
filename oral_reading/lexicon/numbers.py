"""Number-word equivalences between written words and digits.

Handles digit strings, ordinal suffixes (1st, 22nd), ordinal words (first,
twentieth) and cardinal compounds up to billions ("one hundred and twenty three").
"""
from __future__ import annotations

import re
from typing import Dict, Optional

ONES: Dict[str, int] = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4,
    "five": 5, "six": 6, "seven": 7, "eight": 8, "nine": 9,
    "ten": 10, "eleven": 11, "twelve": 12, "thirteen": 13,
    "fourteen": 14, "fifteen": 15, "sixteen": 16, "seventeen": 17,
    "eighteen": 18, "nineteen": 19,
}

TENS: Dict[str, int] = {
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}

# Scales that close a group ("two thousand", "three million")
SCALES: Dict[str, int] = {
    "thousand": 1_000,
    "million": 1_000_000,
    "billion": 1_000_000_000,
}

ORDINALS: Dict[str, int] = {
    "first": 1, "second": 2, "third": 3, "fourth": 4, "fifth": 5,
    "sixth": 6, "seventh": 7, "eighth": 8, "ninth": 9, "tenth": 10,
    "eleventh": 11, "twelfth": 12, "thirteenth": 13, "fourteenth": 14,
    "fifteenth": 15, "sixteenth": 16, "seventeenth": 17, "eighteenth": 18,
    "nineteenth": 19, "twentieth": 20, "thirtieth": 30, "fortieth": 40,
    "fiftieth": 50, "sixtieth": 60, "seventieth": 70, "eightieth": 80,
    "ninetieth": 90, "hundredth": 100, "thousandth": 1000,
}

# Ordinal scale words multiply like their cardinals ("two thousandth" -> 2000)
ORDINAL_SCALES: Dict[str, str] = {
    "hundredth": "hundred",
    "thousandth": "thousand",
    "millionth": "million",
    "billionth": "billion",
}

ORDINAL_SUFFIX_PATTERN = re.compile(r"^(\d+)(st|nd|rd|th)$")

_ONES_WORDS = [
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
]
_TENS_WORDS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]


def _clean(text: str) -> str:
    # Grouped digits ("1,000") are joined; other hyphens and commas separate words ("twenty-one")
    cleaned = text.lower().strip()
    if re.fullmatch(r"\d{1,3}(,\d{3})+", cleaned):
        return cleaned.replace(",", "")
    cleaned = re.sub(r"[,\-]", " ", cleaned)
    cleaned = re.sub(r"[^a-z0-9 ]", "", cleaned)
    return re.sub(r"\s+", " ", cleaned).strip()


def parse_number(text: str) -> Optional[int]:
    """Convert a number word, phrase or digit string to its integer value.

    Examples:
        "fifteen" -> 15
        "one hundred twenty three" -> 123
        "first" -> 1
        "21st" -> 21

    Returns:
        The integer value, or None if the text is not a number
    """
    cleaned = _clean(text)
    if not cleaned:
        return None

    if cleaned.isdigit():
        return int(cleaned)

    suffix_match = ORDINAL_SUFFIX_PATTERN.match(cleaned)
    if suffix_match:
        return int(suffix_match.group(1))

    for table in (ORDINALS, ONES, TENS):
        if cleaned in table:
            return table[cleaned]

    result = 0
    current = 0
    for word in cleaned.split(" "):
        word = ORDINAL_SCALES.get(word, word)
        if word == "and":
            continue
        if word in ONES:
            current += ONES[word]
        elif word in TENS:
            current += TENS[word]
        elif word == "hundred":
            current = (current or 1) * 100
        elif word in SCALES:
            result += (current or 1) * SCALES[word]
            current = 0
        elif word in ORDINALS:
            # "twenty first"
            current += ORDINALS[word]
        else:
            return None
    result += current
    if result > 0 or cleaned == "zero":
        return result
    return None


def number_to_words(num: int) -> Optional[str]:
    """Convert an integer in 0..999,999,999 to its cardinal word form.

    Example: 123 -> "one hundred twenty three"
    """
    if not isinstance(num, int) or num < 0 or num > 999_999_999:
        return None
    if num == 0:
        return "zero"

    def chunk(n: int) -> str:
        if n == 0:
            return ""
        if n < 20:
            return _ONES_WORDS[n]
        if n < 100:
            return _TENS_WORDS[n // 10] + (" " + _ONES_WORDS[n % 10] if n % 10 else "")
        return _ONES_WORDS[n // 100] + " hundred" + (" " + chunk(n % 100) if n % 100 else "")

    parts = []
    if num >= 1_000_000:
        parts.append(chunk(num // 1_000_000) + " million")
        num %= 1_000_000
    if num >= 1_000:
        parts.append(chunk(num // 1_000) + " thousand")
        num %= 1_000
    if num > 0:
        parts.append(chunk(num))
    return " ".join(parts)


def are_number_equivalents(word1: str, word2: str) -> bool:
    """Check whether two words or phrases denote the same number.

    Both sides must parse; "hello" vs "world" is False, "2nd" vs "second" is True.
    """
    num1 = parse_number(word1)
    if num1 is None:
        return False
    num2 = parse_number(word2)
    return num2 is not None and num1 == num2


def is_number_like(text: str) -> bool:
    return parse_number(text) is not None
