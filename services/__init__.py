"""
Services Package

Business logic modules for the recipe application.
"""

from .errors import (
    RecipeServiceError,
    InputUnavailable,
    RecipeNotFound,
    RecipeAlreadySaved,
    RecipeValidationError,
)

from .matching import (
    ScoredRecipe,
    MatchResult,
    normalize_search_ingredient,
    unique_search_terms,
    score_recipe,
    match_recipes,
)

from .rotation import (
    window_of,
    rotate,
    visible_sets,
)

from .session import (
    SearchState,
    add_ingredient,
    remove_ingredient,
    shuffle,
    clear,
)

from .parsing import (
    safe_int,
    parse_temperature,
    parse_bool,
    parse_ingredient_rows,
    parse_instruction_rows,
    parse_recipe_form,
)

from .recipes import (
    fetch_recipes_with_ingredients_and_instructions,
    search_recipes_by_ingredients,
    get_recipe,
    get_user_recipes,
    create_recipe,
    update_recipe,
    delete_recipe,
    image_in_use,
    get_saved_recipes,
    is_saved,
    saved_recipe_ids,
    save_recipe,
    unsave_recipe,
    suggest_ingredients,
)

__all__ = [
    # Errors
    'RecipeServiceError',
    'InputUnavailable',
    'RecipeNotFound',
    'RecipeAlreadySaved',
    'RecipeValidationError',
    # Matching
    'ScoredRecipe',
    'MatchResult',
    'normalize_search_ingredient',
    'unique_search_terms',
    'score_recipe',
    'match_recipes',
    # Rotation
    'window_of',
    'rotate',
    'visible_sets',
    # Session
    'SearchState',
    'add_ingredient',
    'remove_ingredient',
    'shuffle',
    'clear',
    # Parsing
    'safe_int',
    'parse_temperature',
    'parse_bool',
    'parse_ingredient_rows',
    'parse_instruction_rows',
    'parse_recipe_form',
    # Recipe store
    'fetch_recipes_with_ingredients_and_instructions',
    'search_recipes_by_ingredients',
    'get_recipe',
    'get_user_recipes',
    'create_recipe',
    'update_recipe',
    'delete_recipe',
    'image_in_use',
    'get_saved_recipes',
    'is_saved',
    'saved_recipe_ids',
    'save_recipe',
    'unsave_recipe',
    'suggest_ingredients',
]
