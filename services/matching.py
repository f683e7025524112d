"""
Ingredient Matching Service

Resolves one candidate phrase to a vocabulary ingredient. Lookup
strategies are tried in a fixed order and the first hit wins:

1. exact name
2. plural/singular name variants
3. two-word phrase table, then the resolved phrase's name (and variants)
4. exact alias
5. plural/singular alias variants

Name hits (1-3) are tagged 'exact', alias hits (4-5) 'alias'.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .inflection import alias_variants, name_variants
from .vocabulary import VocabularyEntry, VocabularyLookupError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VocabularyMatch:
    entry: VocabularyEntry
    match_type: str
    matched_alias: Optional[str] = None


def _name_match(entry):
    return VocabularyMatch(entry=entry, match_type='exact') if entry else None


def _alias_match(hit):
    if not hit:
        return None
    return VocabularyMatch(entry=hit.entry, match_type='alias', matched_alias=hit.alias)


def lookup_exact_name(phrase, store):
    return _name_match(store.find_ingredient([phrase]))


def lookup_name_variants(phrase, store):
    return _name_match(store.find_ingredient(name_variants(phrase)))


def lookup_two_word_phrase(phrase, store):
    resolved = store.find_two_word_phrase([phrase])
    if not resolved:
        return None
    entry = store.find_ingredient([resolved])
    if entry is None:
        entry = store.find_ingredient(name_variants(resolved))
    return _name_match(entry)


def lookup_alias(phrase, store):
    return _alias_match(store.find_alias([phrase]))


def lookup_alias_variants(phrase, store):
    return _alias_match(store.find_alias(alias_variants(phrase)))


# Precedence order; each entry is (label, strategy)
LOOKUP_STRATEGIES = (
    ('exact name', lookup_exact_name),
    ('name variants', lookup_name_variants),
    ('two-word phrase', lookup_two_word_phrase),
    ('alias', lookup_alias),
    ('alias variants', lookup_alias_variants),
)


def match_candidate(phrase, store, strategies=LOOKUP_STRATEGIES):
    """
    Resolve a candidate phrase against the vocabulary.

    A storage failure inside one strategy is logged and counted as a miss
    for that strategy only; the next strategy still runs.

    Returns:
        VocabularyMatch, or None when every strategy misses
    """
    phrase = (phrase or '').strip().lower()
    if not phrase:
        return None

    for label, strategy in strategies:
        try:
            match = strategy(phrase, store)
        except VocabularyLookupError as e:
            logger.warning("Lookup '%s' failed for %r, treating as a miss: %s", label, phrase, e)
            continue
        if match:
            logger.debug("Matched %r via %s -> %s (id %s)", phrase, label, match.entry.name, match.entry.id)
            return match

    logger.debug("No vocabulary match for %r", phrase)
    return None
