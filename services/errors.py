"""
Service Errors

Exceptions raised by the recipe store and search services. The Flask layer
maps each of them to a JSON error response.
"""


class RecipeServiceError(Exception):
    """Base class for recipe service failures."""
    pass


class InputUnavailable(RecipeServiceError):
    """Raised when the recipe collection could not be fetched."""
    pass


class RecipeNotFound(RecipeServiceError):
    """Raised when a recipe id does not exist."""
    pass


class RecipeAlreadySaved(RecipeServiceError):
    """Raised when a user saves a recipe that is already in their favorites."""
    pass


class RecipeValidationError(RecipeServiceError):
    """Raised when submitted recipe data breaks a creation rule."""
    pass
