"""
Recipe Store Service

Database access for recipes, their ingredients and instructions, and users'
saved recipes. Ingredient search fetches every recipe once and hands the
collection to the matching service.
"""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

from constants import MAX_LENGTHS, MIN_SUGGESTION_QUERY_LENGTH, SUGGESTION_LIMIT, UPDATABLE_RECIPE_FIELDS
from models import db, Recipe, RecipeIngredient, Instruction, SavedRecipe
from utils.sanitizer import (
    sanitize_line, sanitize_recipe_name, sanitize_ingredient,
    sanitize_instruction, sanitize_notes
)

from .errors import InputUnavailable, RecipeNotFound, RecipeAlreadySaved, RecipeValidationError
from .matching import match_recipes, unique_search_terms, MatchResult
from .parsing import parse_bool, parse_temperature, parse_ingredient_rows, parse_instruction_rows

logger = logging.getLogger(__name__)


def _recipes_query():
    """Recipes with ingredients and instructions loaded, newest first."""
    return Recipe.query.options(
        selectinload(Recipe.ingredients),
        selectinload(Recipe.instructions),
    ).order_by(Recipe.created_at.desc(), Recipe.id.desc())


def fetch_recipes_with_ingredients_and_instructions():
    """
    Fetch every recipe, fully populated.

    Raises:
        InputUnavailable: If the database query fails
    """
    try:
        return _recipes_query().all()
    except SQLAlchemyError as e:
        logger.exception("Error fetching recipes")
        raise InputUnavailable(f"Could not load recipes: {e}") from e


def search_recipes_by_ingredients(ingredients):
    """
    Find recipes using the given pantry ingredients.

    Returns:
        MatchResult(exact, related) of ScoredRecipe lists
    """
    terms = unique_search_terms(ingredients)
    if not terms:
        return MatchResult(exact=[], related=[])

    logger.info("Searching for ingredients: %s", terms)
    result = match_recipes(terms, fetch_recipes_with_ingredients_and_instructions())
    logger.info("Found %d exact matches and %d related matches",
                len(result.exact), len(result.related))
    return result


def get_recipe(recipe_id):
    recipe = _recipes_query().filter(Recipe.id == recipe_id).first()
    if recipe is None:
        raise RecipeNotFound(f"Recipe {recipe_id} not found")
    return recipe


def get_user_recipes(user_id):
    """Recipes created by a user, newest first."""
    return _recipes_query().filter(Recipe.user_id == user_id).all()


def _clean_recipe_fields(fields, partial=False):
    """
    Sanitize recipe scalar fields.

    With ``partial`` only the keys present are returned, for updates.
    """
    cleaned = {}

    if not partial or 'name' in fields:
        cleaned['name'] = sanitize_recipe_name(fields.get('name'))
        if not cleaned['name']:
            raise RecipeValidationError("Recipe name is required")
    if not partial or 'cooking_time' in fields:
        cleaned['cooking_time'] = sanitize_line(fields.get('cooking_time'), MAX_LENGTHS['cooking_time'])
        if not cleaned['cooking_time']:
            raise RecipeValidationError("Cooking time is required")
    if not partial or 'yield' in fields:
        cleaned['yield_'] = sanitize_line(fields.get('yield'), MAX_LENGTHS['yield'])
        if not cleaned['yield_']:
            raise RecipeValidationError("Yield is required")
    if not partial or 'temperature' in fields:
        cleaned['temperature'] = parse_temperature(fields.get('temperature'))
    if not partial or 'notes' in fields:
        cleaned['notes'] = sanitize_notes(fields.get('notes'))
    if not partial or 'is_public' in fields:
        cleaned['is_public'] = parse_bool(fields.get('is_public'), default=True)
    if 'image_url' in fields:
        cleaned['image_url'] = fields.get('image_url') or None

    return cleaned


def create_recipe(fields, ingredients, instructions, user_id=None):
    """
    Create a recipe with its ingredient lines and numbered steps.

    Args:
        fields: Scalar recipe fields (name, cooking_time, yield, temperature,
            notes, is_public, image_url)
        ingredients: Ingredient rows, see parse_ingredient_rows
        instructions: Step rows, see parse_instruction_rows; steps are
            numbered 1..n in the order given
        user_id: Owner of the recipe

    Raises:
        RecipeValidationError: If a required field is missing or the recipe
            has no ingredients or no instructions
    """
    cleaned = _clean_recipe_fields(fields)
    ingredient_rows = parse_ingredient_rows(ingredients)
    steps = parse_instruction_rows(instructions)

    if not ingredient_rows:
        raise RecipeValidationError("A recipe needs at least one ingredient")
    if not steps:
        raise RecipeValidationError("A recipe needs at least one instruction")

    recipe = Recipe(user_id=user_id, **cleaned)
    for row in ingredient_rows:
        amount, name = sanitize_ingredient(row['amount'], row['ingredient'])
        recipe.ingredients.append(RecipeIngredient(amount=amount, ingredient=name))
    for number, text in enumerate(steps, start=1):
        recipe.instructions.append(Instruction(step_number=number, instruction=sanitize_instruction(text)))

    db.session.add(recipe)
    db.session.commit()
    logger.info("Created recipe %d (%s) with %d ingredients and %d steps",
                recipe.id, recipe.name, len(ingredient_rows), len(steps))
    return get_recipe(recipe.id)


def update_recipe(recipe_id, fields):
    """Update scalar fields of a recipe. Unknown keys are ignored."""
    recipe = get_recipe(recipe_id)
    allowed = {k: v for k, v in fields.items() if k in UPDATABLE_RECIPE_FIELDS}
    for key, value in _clean_recipe_fields(allowed, partial=True).items():
        setattr(recipe, key, value)
    db.session.commit()
    return recipe


def delete_recipe(recipe_id):
    """Delete a recipe along with its ingredients, steps and saves."""
    recipe = get_recipe(recipe_id)
    db.session.delete(recipe)
    db.session.commit()
    logger.info("Deleted recipe %d", recipe_id)


def get_saved_recipes(user_id):
    """Recipes a user has saved, most recently saved first."""
    saved = SavedRecipe.query.options(
        selectinload(SavedRecipe.recipe).selectinload(Recipe.ingredients),
        selectinload(SavedRecipe.recipe).selectinload(Recipe.instructions),
    ).filter_by(user_id=user_id).order_by(SavedRecipe.created_at.desc(), SavedRecipe.id.desc()).all()
    return [s.recipe for s in saved if s.recipe is not None]


def is_saved(user_id, recipe_id):
    return SavedRecipe.query.filter_by(user_id=user_id, recipe_id=recipe_id).first() is not None


def save_recipe(user_id, recipe_id):
    """
    Add a recipe to a user's favorites.

    Raises:
        RecipeNotFound: If the recipe does not exist
        RecipeAlreadySaved: If the user already saved it
    """
    if db.session.get(Recipe, recipe_id) is None:
        raise RecipeNotFound(f"Recipe {recipe_id} not found")
    if is_saved(user_id, recipe_id):
        raise RecipeAlreadySaved("Recipe already saved")

    saved = SavedRecipe(user_id=user_id, recipe_id=recipe_id)
    db.session.add(saved)
    try:
        db.session.commit()
    except IntegrityError as e:
        # Unique (user_id, recipe_id) constraint
        db.session.rollback()
        raise RecipeAlreadySaved("Recipe already saved") from e

    logger.info("User %s saved recipe %d", user_id, recipe_id)
    return saved


def unsave_recipe(user_id, recipe_id):
    """Remove a recipe from a user's favorites. Returns False if it was not saved."""
    removed = SavedRecipe.query.filter_by(user_id=user_id, recipe_id=recipe_id).delete()
    db.session.commit()
    if removed:
        logger.info("User %s unsaved recipe %d", user_id, recipe_id)
    return bool(removed)


def suggest_ingredients(query, limit=SUGGESTION_LIMIT):
    """
    Autocomplete ingredient names already used in recipes.

    Returns lower-cased distinct names starting with ``query``; queries
    shorter than MIN_SUGGESTION_QUERY_LENGTH return nothing.
    """
    query = (query or '').strip().lower()
    if len(query) < MIN_SUGGESTION_QUERY_LENGTH:
        return []

    escaped = query.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    name = func.lower(RecipeIngredient.ingredient)
    rows = db.session.query(name).filter(
        name.like(f"{escaped}%", escape='\\')
    ).distinct().order_by(name).limit(limit).all()
    return [row[0] for row in rows]


def saved_recipe_ids(user_id):
    """Ids of every recipe a user has saved."""
    rows = db.session.query(SavedRecipe.recipe_id).filter(SavedRecipe.user_id == user_id).all()
    return {row[0] for row in rows}


def image_in_use(image_url):
    """True while any recipe still points at the image."""
    if not image_url:
        return False
    return db.session.query(Recipe.id).filter(Recipe.image_url == image_url).first() is not None
