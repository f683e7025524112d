"""
Ingredient Constants

Curated ingredient word lists and stop-word tables used by candidate
extraction. Bump WORD_LISTS_VERSION whenever a list changes so stored
match results can be traced back to the lists that produced them.
"""

WORD_LISTS_VERSION = 2

# Maximum adjacent token pairs checked against the two-word phrase table
MAX_TWO_WORD_PAIRS = 6

# Common two-word ingredient names, scanned in order against cleaned text
KNOWN_TWO_WORD_INGREDIENTS = (
    'chicken broth', 'beef broth', 'vegetable broth',
    'chicken stock', 'beef stock', 'vegetable stock',
    'chicken breast', 'chicken thigh', 'ground beef', 'ground turkey',
    'ground pork', 'pork chop', 'pork loin',
    'olive oil', 'vegetable oil', 'canola oil', 'sesame oil', 'coconut oil',
    'coconut milk', 'heavy cream', 'sour cream', 'cream cheese',
    'parmesan cheese', 'cheddar cheese', 'mozzarella cheese', 'feta cheese',
    'garlic powder', 'onion powder', 'chili powder', 'curry powder',
    'baking powder', 'baking soda', 'black pepper', 'red pepper',
    'bell pepper', 'cayenne pepper', 'green onion', 'red onion',
    'sweet potato', 'brown sugar', 'powdered sugar', 'maple syrup',
    'soy sauce', 'fish sauce', 'hot sauce', 'worcestershire sauce',
    'tomato paste', 'tomato sauce', 'lemon juice', 'lime juice',
    'brown rice', 'white rice', 'wild rice',
    'balsamic vinegar', 'apple cider', 'cider vinegar', 'rice vinegar',
    'peanut butter', 'vanilla extract', 'bay leaf',
)

# Common single-word ingredient names, scanned when no two-word name hits
KNOWN_SINGLE_WORD_INGREDIENTS = (
    'garlic', 'onion', 'shallot', 'ginger', 'basil', 'oregano', 'thyme',
    'rosemary', 'parsley', 'cilantro', 'dill', 'mint', 'sage',
    'cumin', 'paprika', 'cinnamon', 'nutmeg', 'turmeric', 'salt', 'pepper',
    'shrimp', 'salmon', 'tuna', 'chicken', 'beef', 'pork', 'bacon',
    'sausage', 'turkey', 'tofu', 'egg',
    'butter', 'milk', 'cream', 'yogurt', 'cheese', 'parmesan',
    'flour', 'sugar', 'honey', 'rice', 'quinoa', 'pasta', 'oats',
    'tomato', 'potato', 'carrot', 'celery', 'spinach', 'kale', 'broccoli',
    'cauliflower', 'zucchini', 'mushroom', 'cucumber', 'avocado',
    'lemon', 'lime', 'orange', 'apple', 'banana',
)

# Prep, state, size and serving words removed by the heavy-clean pass.
# "or" is deliberately absent: alternatives are split on it afterwards.
# No word here may appear in KNOWN_TWO_WORD_INGREDIENTS ("hot" sauce).
PREP_STOP_WORDS = (
    # Serving instructions
    'for', 'to', 'taste', 'serving', 'garnish', 'optional', 'as needed',
    'if desired', 'plus', 'more', 'divided',
    # Cutting and prep
    'cut', 'crosswise', 'into', 'julienned', 'sliced', 'crushed', 'chopped',
    'diced', 'minced', 'grated', 'shredded', 'smashed', 'peeled', 'cubed',
    'halved', 'quartered', 'trimmed', 'rinsed', 'drained', 'pitted',
    'seeded', 'deveined', 'zested', 'juiced', 'removed', 'torn', 'mashed',
    'finely', 'roughly', 'coarsely', 'thinly', 'thickly', 'lightly',
    # State
    'fresh', 'freshly', 'dried', 'frozen', 'thawed', 'canned', 'raw',
    'cooked', 'uncooked', 'softened', 'melted', 'packed', 'room',
    'temperature', 'cold', 'warm', 'beaten', 'sifted', 'toasted',
    'boneless', 'skinless', 'organic', 'unsalted', 'salted',
    # Size
    'large', 'medium', 'small', 'whole', 'half', 'quarter', 'extra',
    'jumbo', 'baby', 'bite', 'size', 'sized', 'thick', 'thin', 'inch',
    # Counting words
    'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine',
    'ten', 'about', 'approximately', 'each',
    # Connectives and leftovers
    'and', 'with', 'of', 'in', 'other', 'piece', 'pieces', 'chunk',
    'chunks', 'strips', 'cup', 'cups',
)

# Words never chosen by the positional fallback
POSITIONAL_STOP_WORDS = frozenset({
    'and', 'or', 'the', 'a', 'an', 'of', 'in', 'on', 'at', 'to', 'for',
    'with', 'by', 'other', 'some', 'any', 'few', 'hot',
    'red', 'green', 'yellow', 'white', 'black', 'brown', 'orange', 'golden',
    'dark', 'light', 'good', 'quality', 'best', 'favorite', 'regular',
    'reduced', 'sodium', 'low', 'fat', 'free', 'style',
})
