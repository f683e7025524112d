# Utility modules for the ingredient matcher
from .sanitizer import coerce_ingredient_lines, sanitize_ingredient_text
