import os

# Must be set before the app module is imported
os.environ['FLASK_ENV'] = 'testing'

import pytest

from app import app as flask_app, seed_categories
from models import db, Ingredient, IngredientAlias, TwoWordIngredient, Recipe, RecipeIngredientLine
from services import InMemoryVocabularyStore

# (id, name, category_id)
VOCABULARY = [
    (1, 'Onion', 2),
    (2, 'Garlic', 2),
    (3, 'Chicken Broth', 7),
    (4, 'Quinoa', 4),
    (5, 'Brown Rice', 4),
    (6, 'Rice', 4),
    (7, 'Berry', 3),
    (8, 'Potato', 2),
    (9, 'Olive', 3),
    (10, 'Olive Oil', 7),
    (11, 'Red Onion', 2),
    (12, 'Green Onion', 2),
    (13, 'Cherry', 3),
    (14, 'Basil', 6),
    (15, 'Chili', 6),
    (16, 'Shrimp', 1),
    (17, 'Parmesan', 5),
    (18, 'Tomato', 2),
]

# (alias, ingredient_id)
ALIASES = [
    ('scallion', 12),
    ('parmigiano reggiano', 17),
    ('prawn', 16),
]

PHRASES = ['chicken broth', 'olive oil', 'roasting chicken']

# Ingredient lines stored on recipe 1
RECIPE_LINES = [
    '3 large onions, diced',
    '2 cups chicken broth',
    '4 scallions, thinly sliced',
    'xyzzy unknown item 123',
    '1 tsp minced onion',
]


@pytest.fixture
def store():
    return InMemoryVocabularyStore(VOCABULARY, ALIASES, PHRASES)


@pytest.fixture
def app():
    with flask_app.app_context():
        db.create_all()
        seed_categories()
        for ingredient_id, name, category_id in VOCABULARY:
            db.session.add(Ingredient(id=ingredient_id, name=name, category_id=category_id))
        for alias, ingredient_id in ALIASES:
            db.session.add(IngredientAlias(alias=alias, ingredient_id=ingredient_id))
        for phrase in PHRASES:
            db.session.add(TwoWordIngredient(phrase=phrase))
        db.session.add(Recipe(
            id=1,
            name='Weeknight Soup',
            lines=[RecipeIngredientLine(raw_name=line) for line in RECIPE_LINES],
        ))
        db.session.add(Recipe(id=2, name='Empty Pantry'))
        db.session.commit()

        yield flask_app

        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
