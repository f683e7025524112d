"""
Vocabulary Store

The three read-only lookups the matcher needs from storage: ingredient by
name, alias by text, and two-word phrase by text. Each lookup takes an
ordered collection of candidate spellings, compares case-insensitively,
and returns at most one row. When several rows match, the lowest id wins.
"""

from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from constants import CATEGORY_NAMES, DEFAULT_CATEGORY


class VocabularyLookupError(Exception):
    """Raised when a storage lookup fails (connection, query error, ...)."""
    pass


@dataclass(frozen=True)
class VocabularyEntry:
    id: int
    name: str
    category_id: int
    category: str


@dataclass(frozen=True)
class AliasEntry:
    alias: str
    entry: VocabularyEntry


def _lowered(values):
    """Lower-case, strip, and de-duplicate lookup values, keeping order."""
    result = []
    for value in values:
        value = (value or '').strip().lower()
        if value and value not in result:
            result.append(value)
    return result


class VocabularyStore:
    """Lookup contract consumed by the matcher and the candidate extractor."""

    def find_ingredient(self, names):
        raise NotImplementedError

    def find_alias(self, texts):
        raise NotImplementedError

    def find_two_word_phrase(self, texts):
        raise NotImplementedError


class SqlVocabularyStore(VocabularyStore):
    """VocabularyStore backed by the Flask-SQLAlchemy models."""

    def __init__(self, db, Ingredient, IngredientAlias, TwoWordIngredient):
        self.db = db
        self.Ingredient = Ingredient
        self.IngredientAlias = IngredientAlias
        self.TwoWordIngredient = TwoWordIngredient

    def _entry(self, ingredient):
        category = ingredient.category.name if ingredient.category else None
        return VocabularyEntry(
            id=ingredient.id,
            name=ingredient.name,
            category_id=ingredient.category_id,
            category=category or CATEGORY_NAMES.get(ingredient.category_id, DEFAULT_CATEGORY),
        )

    def _first(self, query, what):
        try:
            return query.first()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise VocabularyLookupError(f"{what} lookup failed: {e}") from e

    def find_ingredient(self, names):
        names = _lowered(names)
        if not names:
            return None
        Ingredient = self.Ingredient
        query = Ingredient.query.filter(
            self.db.func.lower(Ingredient.name).in_(names)
        ).order_by(Ingredient.id)
        ingredient = self._first(query, 'ingredient')
        return self._entry(ingredient) if ingredient else None

    def find_alias(self, texts):
        texts = _lowered(texts)
        if not texts:
            return None
        IngredientAlias = self.IngredientAlias
        query = IngredientAlias.query.filter(
            self.db.func.lower(IngredientAlias.alias).in_(texts)
        ).order_by(IngredientAlias.id)
        alias = self._first(query, 'alias')
        if alias is None or alias.ingredient is None:
            return None
        return AliasEntry(alias=alias.alias, entry=self._entry(alias.ingredient))

    def find_two_word_phrase(self, texts):
        texts = _lowered(texts)
        if not texts:
            return None
        TwoWordIngredient = self.TwoWordIngredient
        query = TwoWordIngredient.query.filter(
            self.db.func.lower(TwoWordIngredient.phrase).in_(texts)
        ).order_by(TwoWordIngredient.id)
        row = self._first(query, 'two-word phrase')
        return row.phrase if row else None


class InMemoryVocabularyStore(VocabularyStore):
    """
    Dict-backed VocabularyStore.

    Args:
        ingredients: iterable of (id, name, category_id)
        aliases: iterable of (alias, ingredient_id); list position acts as the alias id
        phrases: iterable of two-word phrase strings; list position acts as the id
        category_names: category id -> category name
    """

    def __init__(self, ingredients=(), aliases=(), phrases=(), category_names=None):
        self.category_names = category_names or CATEGORY_NAMES
        self.entries = {}
        for ingredient_id, name, category_id in ingredients:
            self.entries[ingredient_id] = VocabularyEntry(
                id=ingredient_id,
                name=name,
                category_id=category_id,
                category=self.category_names.get(category_id, DEFAULT_CATEGORY),
            )
        self.aliases = list(aliases)
        self.phrases = list(phrases)

    def find_ingredient(self, names):
        names = set(_lowered(names))
        hits = [e for e in self.entries.values() if e.name.lower() in names]
        return min(hits, key=lambda e: e.id) if hits else None

    def find_alias(self, texts):
        texts = set(_lowered(texts))
        for alias, ingredient_id in self.aliases:
            if alias.lower() in texts and ingredient_id in self.entries:
                return AliasEntry(alias=alias, entry=self.entries[ingredient_id])
        return None

    def find_two_word_phrase(self, texts):
        texts = set(_lowered(texts))
        for phrase in self.phrases:
            if phrase.lower() in texts:
                return phrase
        return None
