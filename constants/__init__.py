"""
Constants Package

Search sizes and validation limits shared across the application.
"""

from .search import (
    RECIPES_PER_SET,
    MIN_SUGGESTION_QUERY_LENGTH,
    SUGGESTION_LIMIT,
)

from .validation import (
    MAX_LENGTHS,
    MIN_TEMPERATURE,
    MAX_TEMPERATURE,
    UPDATABLE_RECIPE_FIELDS,
    ALLOWED_EXTENSIONS,
)

__all__ = [
    # Search
    'RECIPES_PER_SET',
    'MIN_SUGGESTION_QUERY_LENGTH',
    'SUGGESTION_LIMIT',
    # Validation
    'MAX_LENGTHS',
    'MIN_TEMPERATURE',
    'MAX_TEMPERATURE',
    'UPDATABLE_RECIPE_FIELDS',
    'ALLOWED_EXTENSIONS',
]
