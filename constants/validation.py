"""
Validation Constants

Contains limits and whitelists for validating recipe form input.
"""

# Maximum field lengths for security
MAX_LENGTHS = {
    'recipe_name': 200,
    'cooking_time': 50,
    'yield': 50,
    'notes': 5000,
    'ingredient_name': 200,
    'ingredient_amount': 100,
    'instruction': 2000,
    'search_ingredient': 100,
}

# Plausible oven temperature range (degrees)
MIN_TEMPERATURE = 0
MAX_TEMPERATURE = 1000

# Recipe fields a client may change after creation
UPDATABLE_RECIPE_FIELDS = {
    'name', 'temperature', 'cooking_time', 'yield', 'notes', 'is_public', 'image_url'
}

# Allowed image extensions
ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
