"""
Recipe Models

Contains the Recipe model, its raw ingredient lines, and the per-recipe
ingredient match details saved after matching.
"""

from .base import db


class Recipe(db.Model):
    """Recipe that matched ingredient details are saved against."""
    __tablename__ = 'recipe'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    details = db.relationship('RecipeIngredientDetail', backref='recipe', lazy=True, cascade='all, delete-orphan')
    lines = db.relationship('RecipeIngredientLine', backref='recipe', lazy=True, cascade='all, delete-orphan',
                            order_by='RecipeIngredientLine.id')


class RecipeIngredientLine(db.Model):
    """An ingredient line as written in the recipe, before matching."""
    __tablename__ = 'recipe_ingredient_line'

    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    raw_name = db.Column(db.String(500), nullable=False)


class RecipeIngredientDetail(db.Model):
    """A raw ingredient line resolved to a vocabulary ingredient, with match provenance."""
    __tablename__ = 'recipe_ingredient_detail'

    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    original_text = db.Column(db.String(500), nullable=False)
    matched_term = db.Column(db.String(200), default='')
    match_type = db.Column(db.String(10), nullable=False)  # 'exact' or 'alias'
    matched_alias = db.Column(db.String(200), nullable=True)
    amount = db.Column(db.String(50), default='')
    unit = db.Column(db.String(50), default='')
    ingredient = db.relationship('Ingredient')

    def to_dict(self):
        return {
            'detail_id': self.id,
            'original_text': self.original_text,
            'matched_term': self.matched_term,
            'match_type': self.match_type,
            'matched_alias': self.matched_alias,
            'amount': self.amount,
            'unit': self.unit,
            'ingredient': self.ingredient.to_dict() if self.ingredient else None,
        }
