"""
Category Constants

Fixed ingredient category table (category id -> category key). Grouping of
match results takes this table as an argument, so adding a category only
needs a new row here and in the ingredient_category table.
"""

CATEGORY_NAMES = {
    1: 'protein',
    2: 'vegetable',
    3: 'fruit',
    4: 'grain',
    5: 'dairy',
    6: 'spice',
    7: 'other',
}

DEFAULT_CATEGORY = 'other'
