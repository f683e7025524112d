"""
Unit Constants

Measurement unit words and fraction characters recognised when cleaning
ingredient lines and when splitting off the amount/unit prefix.
"""

# Unit words stripped by the light-clean pass. Kept to measurement and
# container units so descriptive words survive for two-word phrase lookup.
MEASUREMENT_UNITS = (
    # Weight
    'pound', 'pounds', 'lb', 'lbs',
    'ounce', 'ounces', 'oz',
    'gram', 'grams', 'g',
    'kilogram', 'kilograms', 'kg',
    'milligram', 'milligrams', 'mg',
    # Volume
    'cup', 'cups',
    'tablespoon', 'tablespoons', 'tbsp', 'tbs', 'tb',
    'teaspoon', 'teaspoons', 'tsp', 'ts',
    'milliliter', 'milliliters', 'millilitre', 'millilitres', 'ml',
    'liter', 'liters', 'litre', 'litres', 'l',
    'pint', 'pints', 'pt',
    'quart', 'quarts', 'qt',
    'gallon', 'gallons', 'gal',
    # Containers
    'can', 'cans', 'jar', 'jars',
    'package', 'packages', 'pkg',
    'box', 'boxes', 'bag', 'bags',
)

# Units that may follow a quantity in the heavy-clean pass ("2 cups",
# "1-2 lbs", "1/2 tsp"). Includes count units that only read as units
# when they come right after a number.
QUANTITY_UNITS = MEASUREMENT_UNITS + (
    'clove', 'cloves',
    'piece', 'pieces',
    'slice', 'slices',
    'stalk', 'stalks',
    'stick', 'sticks',
    'sprig', 'sprigs',
    'bunch', 'bunches',
    'head', 'heads',
    'pinch', 'pinches',
    'dash', 'dashes',
    'inch', 'inches', 'cm',
)

# Units recognised directly after the amount when splitting a line into
# amount / unit / name. Longest forms first so "fl oz" wins over "fl".
COMMON_UNITS = (
    'fluid ounces', 'fluid ounce', 'fl. oz.', 'fl oz',
    'tablespoons', 'tablespoon', 'teaspoons', 'teaspoon',
    'milliliters', 'milliliter', 'millilitres', 'millilitre',
    'kilograms', 'kilogram', 'milligrams', 'milligram',
    'packages', 'package', 'gallons', 'gallon',
    'ounces', 'ounce', 'pounds', 'pound', 'grams', 'gram',
    'liters', 'liter', 'litres', 'litre',
    'quarts', 'quart', 'pints', 'pint',
    'pinches', 'pinch', 'dashes', 'dash',
    'cloves', 'clove', 'slices', 'slice', 'pieces', 'piece',
    'bunches', 'bunch', 'sprigs', 'sprig', 'stalks', 'stalk',
    'sticks', 'stick', 'sheets', 'sheet', 'heads', 'head',
    'leaves', 'leaf', 'cans', 'can', 'jars', 'jar',
    'boxes', 'box', 'bags', 'bag',
    'inches', 'inch',
    'cups', 'cup', 'tbsp', 'tbs', 'tsp', 'pkg',
    'lbs', 'lb', 'oz', 'kg', 'mg', 'ml', 'qt', 'pt', 'gal', 'cm',
    'tb', 'ts', 'dl', 'c', 'g', 'l',
    'small', 'medium', 'large',
)

# Unicode vulgar fraction characters
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,    # ½
    '\u2153': 1/3,    # ⅓
    '\u2154': 2/3,    # ⅔
    '\u00bc': 0.25,   # ¼
    '\u00be': 0.75,   # ¾
    '\u2155': 0.2,    # ⅕
    '\u2156': 0.4,    # ⅖
    '\u2157': 0.6,    # ⅗
    '\u2158': 0.8,    # ⅘
    '\u2159': 1/6,    # ⅙
    '\u215a': 5/6,    # ⅚
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
}

FRACTION_CHARS = ''.join(UNICODE_FRACTIONS)
