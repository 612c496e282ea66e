"""Static lexical equivalence tables: homophones and number words."""
from .homophones import DEFAULT_TABLES, HOMOPHONE_GROUPS, LexicalTables
from .numbers import are_number_equivalents, is_number_like, number_to_words, parse_number

__all__ = [
    "DEFAULT_TABLES",
    "HOMOPHONE_GROUPS",
    "LexicalTables",
    "are_number_equivalents",
    "is_number_like",
    "number_to_words",
    "parse_number",
]
