"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .ingredient import Ingredient, IngredientAlias, IngredientCategory, TwoWordIngredient
from .recipe import Recipe, RecipeIngredientDetail, RecipeIngredientLine

__all__ = [
    'db',
    'Ingredient',
    'IngredientAlias',
    'IngredientCategory',
    'TwoWordIngredient',
    'Recipe',
    'RecipeIngredientDetail',
    'RecipeIngredientLine',
]
