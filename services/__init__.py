"""
Services Package

Ingredient candidate extraction, vocabulary matching, and batch search.
"""

from .parsing import (
    ParsedIngredient,
    parse_ingredient,
)

from .inflection import (
    alias_variants,
    name_variants,
)

from .vocabulary import (
    AliasEntry,
    InMemoryVocabularyStore,
    SqlVocabularyStore,
    VocabularyEntry,
    VocabularyLookupError,
    VocabularyStore,
)

from .extraction import (
    extract_candidate_groups,
)

from .matching import (
    LOOKUP_STRATEGIES,
    VocabularyMatch,
    match_candidate,
)

from .search import (
    MatchResult,
    SearchTimeout,
    search_ingredients,
)

__all__ = [
    # Parsing
    'ParsedIngredient',
    'parse_ingredient',
    # Inflection
    'alias_variants',
    'name_variants',
    # Vocabulary
    'AliasEntry',
    'InMemoryVocabularyStore',
    'SqlVocabularyStore',
    'VocabularyEntry',
    'VocabularyLookupError',
    'VocabularyStore',
    # Extraction
    'extract_candidate_groups',
    # Matching
    'LOOKUP_STRATEGIES',
    'VocabularyMatch',
    'match_candidate',
    # Search
    'MatchResult',
    'SearchTimeout',
    'search_ingredients',
]
