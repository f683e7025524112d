"""
Constants Package

Word lists, unit tables, categories and validation limits.
"""

from .categories import CATEGORY_NAMES, DEFAULT_CATEGORY
from .ingredients import (
    KNOWN_SINGLE_WORD_INGREDIENTS,
    KNOWN_TWO_WORD_INGREDIENTS,
    MAX_TWO_WORD_PAIRS,
    POSITIONAL_STOP_WORDS,
    PREP_STOP_WORDS,
    WORD_LISTS_VERSION,
)
from .units import (
    COMMON_UNITS,
    FRACTION_CHARS,
    MEASUREMENT_UNITS,
    QUANTITY_UNITS,
    UNICODE_FRACTIONS,
)
from .validation import MATCH_TYPES, MAX_INGREDIENT_LINES, MAX_LENGTHS

__all__ = [
    'CATEGORY_NAMES',
    'DEFAULT_CATEGORY',
    'KNOWN_SINGLE_WORD_INGREDIENTS',
    'KNOWN_TWO_WORD_INGREDIENTS',
    'MAX_TWO_WORD_PAIRS',
    'POSITIONAL_STOP_WORDS',
    'PREP_STOP_WORDS',
    'WORD_LISTS_VERSION',
    'COMMON_UNITS',
    'FRACTION_CHARS',
    'MEASUREMENT_UNITS',
    'QUANTITY_UNITS',
    'UNICODE_FRACTIONS',
    'MATCH_TYPES',
    'MAX_INGREDIENT_LINES',
    'MAX_LENGTHS',
]
