"""
Candidate Extraction Service

Turns one raw ingredient line ("2 cans (14.5 oz) reduced-sodium chicken
broth") into an ordered list of short search phrases likely to name the
ingredient, most specific first:

1. light clean (keeps descriptive words)
2. heavy clean (drops quantities, prep and size words)
3. "or" alternatives, one group per side  -> returns early when present
   (each side gets its own two-word window)
4. two-word phrase table window            -> returns early on a hit
5. curated two-word names
6. curated single-word names
7. positional fallback (last two words, last word)
"""

import logging
import re

from constants import (
    FRACTION_CHARS,
    KNOWN_SINGLE_WORD_INGREDIENTS,
    KNOWN_TWO_WORD_INGREDIENTS,
    MAX_TWO_WORD_PAIRS,
    MEASUREMENT_UNITS,
    POSITIONAL_STOP_WORDS,
    PREP_STOP_WORDS,
    QUANTITY_UNITS,
)
from .inflection import name_variants
from .vocabulary import VocabularyLookupError

logger = logging.getLogger(__name__)

ALTERNATIVE_SEPARATOR = ' or '


def _alternation(words):
    # Longest first so "tablespoons" is not cut short by "tablespoon"
    return '|'.join(re.escape(w) for w in sorted(words, key=len, reverse=True))


def _word_pattern(words):
    return re.compile(r'\b(?:' + _alternation(words) + r')\b', re.IGNORECASE)


def _known_name_patterns(names):
    """(name, pattern) pairs matching a curated name or its plain plural."""
    return [
        (name, re.compile(r'\b' + re.escape(name) + r'(?:s|es)?\b', re.IGNORECASE))
        for name in names
    ]


_NUMBER = r'\d+(?:[./]\d+)?'
_QUANTITY_WITH_UNIT_RE = re.compile(
    r'(?:' + _NUMBER + r'(?:\s*-\s*' + _NUMBER + r')?|\d*[' + FRACTION_CHARS + r'])'
    r'\s*(?:' + _alternation(QUANTITY_UNITS) + r')\b',
    re.IGNORECASE,
)
_STANDALONE_NUMBER_RE = re.compile(r'\d+(?:[./,-]\d+)*')
_FRACTION_RE = re.compile('[' + FRACTION_CHARS + ']')
_PERIOD_SEMICOLON_RE = re.compile(r'[.;]')
_DIGITS_RE = re.compile(r'\d+')
_PUNCTUATION_RE = re.compile(r'[^\w\s]|_')
_WHITESPACE_RE = re.compile(r'\s+')

_MEASUREMENT_UNIT_RE = _word_pattern(MEASUREMENT_UNITS)
_PREP_STOP_WORD_RE = _word_pattern(PREP_STOP_WORDS)

_KNOWN_TWO_WORD_PATTERNS = _known_name_patterns(KNOWN_TWO_WORD_INGREDIENTS)
_KNOWN_SINGLE_WORD_PATTERNS = _known_name_patterns(KNOWN_SINGLE_WORD_INGREDIENTS)


def _collapse(text):
    return _WHITESPACE_RE.sub(' ', text).strip()


def light_clean(text):
    """
    Lower-case and drop numbers, fractions, unit words and punctuation.

    Descriptive words are kept so phrases like "chicken broth" or
    "roasting chicken" stay intact for the two-word window.
    """
    text = text.lower()
    text = _PERIOD_SEMICOLON_RE.sub('', text)
    text = _DIGITS_RE.sub(' ', text)
    text = _FRACTION_RE.sub(' ', text)
    text = _MEASUREMENT_UNIT_RE.sub(' ', text)
    text = _PUNCTUATION_RE.sub(' ', text)
    return _collapse(text)


def heavy_clean(text):
    """Strip quantities (with units and ranges), prep/size/serving words and punctuation."""
    text = text.lower()
    text = _QUANTITY_WITH_UNIT_RE.sub(' ', text)
    text = _STANDALONE_NUMBER_RE.sub(' ', text)
    text = _FRACTION_RE.sub(' ', text)
    text = _PUNCTUATION_RE.sub(' ', text)
    text = _PREP_STOP_WORD_RE.sub(' ', text)
    return _collapse(text)


def two_word_window(text, store, max_pairs=MAX_TWO_WORD_PAIRS):
    """
    Slide over adjacent token pairs of light-cleaned text and return the
    first pair (or singular/plural variant of it) found in the two-word
    phrase table, as stored there. None when nothing hits.
    """
    tokens = text.split()
    pairs = [f"{first} {second}" for first, second in zip(tokens, tokens[1:])]

    for pair in pairs[:max_pairs]:
        try:
            phrase = store.find_two_word_phrase([pair])
            if not phrase:
                phrase = store.find_two_word_phrase(name_variants(pair))
        except VocabularyLookupError as e:
            logger.warning("Two-word phrase lookup failed for %r: %s", pair, e)
            continue
        if phrase:
            logger.debug("Two-word phrase hit: %r -> %r", pair, phrase)
            return phrase
    return None


def split_alternatives(text):
    """
    Split heavy-cleaned text on " or " into one candidate group per side.

    Each group holds the full side, its last word and its second-to-last
    word (words of two letters or fewer are ignored). [] when the text
    offers no alternatives.
    """
    if ALTERNATIVE_SEPARATOR not in text:
        return []

    groups = []
    for side in text.split(ALTERNATIVE_SEPARATOR):
        side = side.strip()
        if not side:
            continue
        group = [side]
        words = [w for w in side.split() if len(w) > 2]
        if words:
            group.append(words[-1])
        if len(words) >= 2:
            group.append(words[-2])
        groups.append(group)
    return groups


def scan_known_names(text, patterns):
    """First curated name (in list order) present in text, or None."""
    for name, pattern in patterns:
        if pattern.search(text):
            return name
    return None


def positional_candidates(text):
    """Last two meaningful words, then the last word: the head noun sits rightmost."""
    words = [
        w for w in text.split()
        if len(w) > 2 and not w.isdigit() and w not in POSITIONAL_STOP_WORDS
    ]
    candidates = []
    if len(words) >= 2:
        candidates.append(' '.join(words[-2:]))
    if words:
        candidates.append(words[-1])
    return candidates


def _dedupe_groups(groups):
    """Trim, drop empties and case-insensitive repeats across all groups."""
    seen = set()
    result = []
    for group in groups:
        kept = []
        for candidate in group:
            candidate = candidate.strip()
            key = candidate.lower()
            if candidate and key not in seen:
                seen.add(key)
                kept.append(candidate)
        if kept:
            result.append(kept)
    return result


def _lead_with_phrase(group, store):
    """Put the side's two-word phrase table hit, if any, ahead of its other candidates."""
    phrase = two_word_window(group[0], store)
    return [phrase] + group if phrase else group


def extract_candidate_groups(text, store=None):
    """
    Candidate phrases for one ingredient line, grouped by alternative.

    Lines without " or " alternatives give a single group. Lines offering
    substitutes ("quinoa or brown rice") give one group per side so each
    side can be matched on its own; the two-word window then runs on each
    side separately. The window is skipped when no store is given.
    """
    if not text or not text.strip():
        return []

    light = light_clean(text)
    if not light:
        return []

    cleaned = heavy_clean(text)

    groups = split_alternatives(cleaned)
    if groups:
        if store is not None:
            groups = [_lead_with_phrase(group, store) for group in groups]
        return _dedupe_groups(groups)

    if store is not None:
        phrase = two_word_window(light, store)
        if phrase:
            return [[phrase]]

    if not cleaned:
        return []

    known = (scan_known_names(cleaned, _KNOWN_TWO_WORD_PATTERNS)
             or scan_known_names(cleaned, _KNOWN_SINGLE_WORD_PATTERNS))
    if known:
        return [[known]]

    return _dedupe_groups([positional_candidates(cleaned)])
