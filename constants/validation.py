"""
Validation Constants

Limits and whitelists applied to ingredient search and save requests.
"""

# Valid match provenance values
MATCH_TYPES = {'exact', 'alias'}

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_text': 500,
    'matched_term': 200,
    'matched_alias': 200,
    'amount': 50,
    'unit': 50,
}

# Upper bound on lines accepted by one search request
MAX_INGREDIENT_LINES = 500
