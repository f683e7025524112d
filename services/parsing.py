"""
Parsing Service

Splits an ingredient line into its leading amount, unit and remaining name,
e.g. "1 1/2 cups flour" -> ("1 1/2", "cups", "flour"). Amounts stay text;
no conversion is attempted.
"""

import re
from collections import namedtuple

from constants import COMMON_UNITS, FRACTION_CHARS

ParsedIngredient = namedtuple('ParsedIngredient', ['amount', 'unit', 'name', 'original'])

# "1", "1/2", "1.5", "1-2", "1 1/2", "½", "1½"
_AMOUNT_RE = re.compile(
    r'^(\d+(?:[/.\-]\d+)?(?:\s+\d+/\d+)?[' + FRACTION_CHARS + r']?|[' + FRACTION_CHARS + r'])\s*'
)
_UNIT_RE = re.compile(
    r'^(' + '|'.join(re.escape(u) for u in COMMON_UNITS) + r')(?:\s+|\b)',
    re.IGNORECASE,
)
_PAREN_RE = re.compile(r'^\(([^)]+)\)\s+')
_BULLET_RE = re.compile(r'^[•▢\-\s]+')


def _find_unit(text):
    match = _UNIT_RE.match(text)
    if not match:
        return '', text
    return match.group(1).strip(), text[match.end():].strip()


def parse_ingredient(text):
    """
    Parse an ingredient line into ParsedIngredient(amount, unit, name, original).

    "salt and pepper to taste" -> ('', '', 'salt and pepper to taste', ...)
    "1 (14 ounce) can tomatoes" -> ('1', 'can', 'tomatoes', ...)
    "1 (14 ounce) tomatoes"     -> ('1', '14 ounce', 'tomatoes', ...)
    """
    original = (text or '').strip()
    if not original:
        return ParsedIngredient('', '', '', original)

    text = _BULLET_RE.sub('', original).strip()

    amount = ''
    match = _AMOUNT_RE.match(text)
    if match:
        amount = match.group(1).strip()
        text = text[match.end():].strip()

    # Parenthetical package size before the unit: "(14 ounce) can tomatoes"
    paren = _PAREN_RE.match(text)
    unit, name = _find_unit(text)
    if not unit and paren:
        after_paren = text[paren.end():]
        unit, name = _find_unit(after_paren)
        if not unit:
            content = paren.group(1).lower()
            if any(re.search(r'\b' + re.escape(u) + r'\b', content) for u in COMMON_UNITS):
                unit, name = paren.group(1).strip(), after_paren.strip()
            else:
                name = text

    name = name.lstrip(',- ').strip()
    return ParsedIngredient(amount, unit, name or original, original)
