import hmac
import logging
import sqlite3
from functools import partial

import click
from flask import Flask, request, jsonify
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from config import get_config
from constants import CATEGORY_NAMES, MATCH_TYPES, MAX_INGREDIENT_LINES, MAX_LENGTHS
from models import (
    db, Ingredient, IngredientAlias, IngredientCategory, TwoWordIngredient,
    Recipe, RecipeIngredientDetail,
)
from services import SqlVocabularyStore, SearchTimeout, search_ingredients
from utils import coerce_ingredient_lines, sanitize_ingredient_text

app = Flask(__name__)
app.config.from_object(get_config())
# Keep category groups in first-appearance order
app.json.sort_keys = False

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)
logger = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable SQLite foreign key enforcement."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_vocabulary_store():
    """Vocabulary lookups backed by the application database."""
    return SqlVocabularyStore(db, Ingredient, IngredientAlias, TwoWordIngredient)


def is_authorized():
    """True when no API token is configured or the request carries it as a bearer token."""
    token = app.config.get('SEARCH_API_TOKEN')
    if not token:
        return True
    scheme, _, supplied = request.headers.get('Authorization', '').partition(' ')
    return scheme.lower() == 'bearer' and hmac.compare_digest(supplied.strip(), token)


def serialize_search_result(result):
    return {
        'matched': {
            category: [m.to_dict() for m in matches]
            for category, matches in result['matched'].items()
        },
        'unmatched': result['unmatched'],
        'total_matched': result['total_matched'],
        'total_unmatched': result['total_unmatched'],
    }


def error_response(message, status):
    return jsonify({'error': message}), status


def _is_id(value):
    return isinstance(value, int) and not isinstance(value, bool)


def run_search(lines):
    """
    Match lines with the configured limits.

    Returns:
        (result, None) on success, (None, error response) on timeout or failure
    """
    try:
        result = search_ingredients(
            lines,
            get_vocabulary_store(),
            batch_size=app.config['INGREDIENT_SEARCH_BATCH_SIZE'],
            max_candidates=app.config['INGREDIENT_MAX_CANDIDATES'],
            timeout=app.config['INGREDIENT_SEARCH_TIMEOUT'],
            category_names=CATEGORY_NAMES,
            clean=partial(sanitize_ingredient_text, max_length=MAX_LENGTHS['ingredient_text']),
        )
    except SearchTimeout:
        logger.warning("Ingredient search timed out after %ss", app.config['INGREDIENT_SEARCH_TIMEOUT'])
        return None, error_response('Request timeout - processing took too long', 408)
    except Exception:
        logger.exception("Ingredient search error")
        return None, error_response('Internal server error', 500)

    logger.info("Ingredient search: %d matched, %d unmatched",
                result['total_matched'], result['total_unmatched'])
    return result, None


def replace_details(recipe, details):
    """Swap a recipe's saved matches for details. Returns an error response or None."""
    try:
        RecipeIngredientDetail.query.filter_by(recipe_id=recipe.id).delete()
        db.session.add_all(details)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to save ingredients for recipe %s", recipe.id)
        return error_response('Failed to save ingredients', 500)

    logger.info("Saved %d ingredient matches for recipe %s", len(details), recipe.id)
    return None


def detail_from_fields(recipe_id, fields):
    return RecipeIngredientDetail(
        recipe_id=recipe_id,
        ingredient_id=fields['ingredient_id'],
        original_text=sanitize_ingredient_text(fields.get('original_text'), MAX_LENGTHS['ingredient_text']),
        matched_term=sanitize_ingredient_text(fields.get('matched_term'), MAX_LENGTHS['matched_term']),
        match_type=fields['match_type'],
        matched_alias=sanitize_ingredient_text(fields.get('matched_alias'), MAX_LENGTHS['matched_alias']) or None,
        amount=sanitize_ingredient_text(fields.get('amount'), MAX_LENGTHS['amount']),
        unit=sanitize_ingredient_text(fields.get('unit'), MAX_LENGTHS['unit']),
    )


# ============================================
# ROUTES - INGREDIENT SEARCH
# ============================================

@app.route('/api/ingredients/search', methods=['POST'])
def ingredients_search():
    """Match raw ingredient lines against the ingredient vocabulary."""
    if not is_authorized():
        return error_response('Authentication required', 401)

    payload = request.get_json(silent=True)
    ingredients = payload.get('ingredients') if isinstance(payload, dict) else None
    if not isinstance(ingredients, list):
        return error_response('Ingredients array is required', 400)
    if len(ingredients) > MAX_INGREDIENT_LINES:
        return error_response(f'At most {MAX_INGREDIENT_LINES} ingredients per request', 400)

    lines = coerce_ingredient_lines(ingredients)
    logger.info("Ingredient search: processing %d lines", len(lines))

    result, error = run_search(lines)
    if error:
        return error
    return jsonify(serialize_search_result(result))


@app.route('/api/ingredients/analyze', methods=['POST'])
def ingredients_analyze():
    """Match a recipe's stored ingredient lines and save the matches as its details."""
    if not is_authorized():
        return error_response('Authentication required', 401)

    payload = request.get_json(silent=True)
    recipe_id = payload.get('recipe_id') if isinstance(payload, dict) else None
    if not _is_id(recipe_id):
        return error_response('recipe_id is required', 400)

    recipe = db.session.get(Recipe, recipe_id)
    if recipe is None:
        return error_response('Recipe not found', 404)

    lines = [line.raw_name for line in recipe.lines]
    if not any(line.strip() for line in lines):
        return error_response('No ingredients found', 404)
    logger.info("Analyzing %d ingredient lines for recipe %s", len(lines), recipe.id)

    result, error = run_search(lines)
    if error:
        return error

    details = [
        detail_from_fields(recipe.id, match.to_dict())
        for matches in result['matched'].values()
        for match in matches
    ]
    error = replace_details(recipe, details)
    if error:
        return error

    response = {'recipe_id': recipe.id, 'saved_count': len(details)}
    response.update(serialize_search_result(result))
    return jsonify(response)


# ============================================
# ROUTES - SAVED MATCHES
# ============================================

@app.route('/api/ingredients/save', methods=['POST'])
def ingredients_save():
    """Replace a recipe's saved ingredient matches."""
    if not is_authorized():
        return error_response('Authentication required', 401)

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return error_response('recipe_id and ingredients array are required', 400)
    recipe_id = payload.get('recipe_id')
    ingredients = payload.get('ingredients')
    if not _is_id(recipe_id) or not isinstance(ingredients, list):
        return error_response('recipe_id and ingredients array are required', 400)

    recipe = db.session.get(Recipe, recipe_id)
    if recipe is None:
        return error_response('Recipe not found', 404)

    details = []
    for item in ingredients:
        if not isinstance(item, dict) or not _is_id(item.get('ingredient_id')):
            return error_response('Each ingredient needs an ingredient_id', 400)
        if item.get('match_type') not in MATCH_TYPES:
            return error_response(f"match_type must be one of {sorted(MATCH_TYPES)}", 400)
        details.append(detail_from_fields(recipe.id, item))

    ingredient_ids = {d.ingredient_id for d in details}
    if ingredient_ids:
        known = {row[0] for row in db.session.query(Ingredient.id).filter(Ingredient.id.in_(ingredient_ids))}
        missing = sorted(ingredient_ids - known)
        if missing:
            return error_response(f'Unknown ingredient ids: {missing}', 400)

    error = replace_details(recipe, details)
    if error:
        return error
    return jsonify({'success': True, 'recipe_id': recipe.id, 'saved_count': len(details)})


@app.route('/api/ingredients/load/<int:recipe_id>')
def ingredients_load(recipe_id):
    """Return a recipe's saved ingredient matches."""
    if not is_authorized():
        return error_response('Authentication required', 401)

    recipe = db.session.get(Recipe, recipe_id)
    if recipe is None:
        return error_response('Recipe not found', 404)

    details = RecipeIngredientDetail.query.filter_by(recipe_id=recipe.id).order_by(RecipeIngredientDetail.id).all()
    return jsonify({
        'recipe_id': recipe.id,
        'ingredients': [d.to_dict() for d in details],
    })


# ============================================
# INITIALIZE DATABASE
# ============================================

def seed_categories():
    """Insert any missing fixed ingredient categories. Returns the number added."""
    added = 0
    for category_id, name in CATEGORY_NAMES.items():
        if db.session.get(IngredientCategory, category_id) is None:
            db.session.add(IngredientCategory(id=category_id, name=name))
            added += 1
    db.session.commit()
    return added


def init_db():
    with app.app_context():
        db.create_all()
        added = seed_categories()
        logger.info("Database initialized (%d categories added)", added)


@app.cli.command('init-db')
def init_db_command():
    """Create tables and seed ingredient categories."""
    init_db()
    click.echo('Initialized the database.')


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
