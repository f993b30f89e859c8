"""
Search Constants

Sizes and limits used by ingredient search, set rotation and autocomplete.
"""

# Recipes shown per set for each of the exact and related lists
RECIPES_PER_SET = 3

# Autocomplete only kicks in after this many characters
MIN_SUGGESTION_QUERY_LENGTH = 2

# Maximum autocomplete suggestions returned
SUGGESTION_LIMIT = 5
