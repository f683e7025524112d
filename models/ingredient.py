"""
Ingredient Models

Contains the controlled ingredient vocabulary: categories, canonical
ingredients, their aliases, and the two-word phrase table.
"""

from .base import db


class IngredientCategory(db.Model):
    """One of the small fixed set of ingredient categories (protein, vegetable, ...)."""
    __tablename__ = 'ingredient_category'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), unique=True, nullable=False)


class Ingredient(db.Model):
    """
    Canonical ingredient (vocabulary entry).

    Names are stored in their human-readable singular form. Matching is
    case-insensitive, so the name is indexed but not unique.
    """
    __tablename__ = 'ingredient'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    category_id = db.Column(db.Integer, db.ForeignKey('ingredient_category.id'), nullable=False, index=True)
    category = db.relationship('IngredientCategory')

    def to_dict(self):
        return {
            'ingredient_id': self.id,
            'name': self.name,
            'category_id': self.category_id,
            'category': self.category.name if self.category else None,
        }


class IngredientAlias(db.Model):
    """Maps an alternate name to a canonical ingredient (e.g., 'scallion' -> 'Green Onion')"""
    __tablename__ = 'ingredient_alias'

    id = db.Column(db.Integer, primary_key=True)
    alias = db.Column(db.String(100), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    ingredient = db.relationship('Ingredient', backref='aliases')


class TwoWordIngredient(db.Model):
    """Known two-word ingredient phrase (e.g., 'chicken broth'), independent of the vocabulary."""
    __tablename__ = 'two_word_ingredient'

    id = db.Column(db.Integer, primary_key=True)
    phrase = db.Column(db.String(100), unique=True, nullable=False, index=True)
