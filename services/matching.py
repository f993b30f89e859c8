"""
Ingredient Matching Service

Scores recipes against a list of pantry ingredients and splits the results
into exact matches (every searched ingredient is used) and related matches
(some are used).

Matching is plain substring containment on trimmed, lower-cased names, so the
search term "onion" matches a recipe line reading "diced onion".

Scoring per recipe:
    match_count      = searched ingredients found in any recipe ingredient
    match_percentage = match_count / number of recipe ingredients * 100
    score            = match_count + match_percentage / 100

The score is additive rather than lexicographic. Several search terms can hit
the same recipe line, pushing match_percentage past 100, so a short recipe
can outrank one with more matches.
"""

from dataclasses import dataclass
from operator import attrgetter
from typing import NamedTuple

from .errors import InputUnavailable


@dataclass(frozen=True)
class ScoredRecipe:
    """A recipe annotated with how well it matches the current search."""
    recipe: object
    match_count: int
    match_percentage: float
    score: float
    matched_ingredients: tuple = ()

    @property
    def id(self):
        return _field(self.recipe, 'id')

    def to_dict(self):
        if hasattr(self.recipe, 'to_dict'):
            data = self.recipe.to_dict()
        elif isinstance(self.recipe, dict):
            data = dict(self.recipe)
        else:
            data = {'id': self.id}
        data.update({
            'match_count': self.match_count,
            'match_percentage': self.match_percentage,
            'score': self.score,
            'matched_ingredients': list(self.matched_ingredients),
        })
        return data


class MatchResult(NamedTuple):
    exact: list
    related: list


def _field(obj, name, default=None):
    """Read a field from a model instance or a plain dict."""
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def normalize_search_ingredient(value):
    """Trim and lower-case an ingredient name. Non-strings normalize to ''."""
    if not isinstance(value, str):
        return ''
    return value.strip().lower()


def unique_search_terms(search_ingredients):
    """
    Normalize search ingredients into an ordered list of distinct, non-blank
    terms. First occurrence wins.
    """
    terms = []
    for raw in search_ingredients or ():
        term = normalize_search_ingredient(raw)
        if term and term not in terms:
            terms.append(term)
    return terms


def recipe_ingredient_names(recipe):
    """
    Return (normalized names, total ingredient count) for a recipe.

    A recipe without a usable ingredient list yields ([], 0). Ingredient rows
    without a name still count towards the total but never match.
    """
    rows = _field(recipe, 'ingredients')
    if rows is None or isinstance(rows, (str, bytes)):
        return [], 0
    try:
        rows = list(rows)
    except TypeError:
        return [], 0

    names = []
    for row in rows:
        name = normalize_search_ingredient(_field(row, 'ingredient'))
        if name:
            names.append(name)
    return names, len(rows)


def score_recipe(search_terms, recipe):
    """Score one recipe against already-normalized search terms."""
    names, total = recipe_ingredient_names(recipe)

    matched = tuple(
        term for term in search_terms
        if any(term in name for name in names)
    )
    match_count = len(matched)
    # Recipes with no ingredients would divide by zero; they cover nothing
    match_percentage = (match_count / total) * 100 if total else 0.0
    score = match_count + match_percentage / 100

    return ScoredRecipe(
        recipe=recipe,
        match_count=match_count,
        match_percentage=match_percentage,
        score=score,
        matched_ingredients=matched,
    )


def match_recipes(search_ingredients, recipes):
    """
    Rank recipes by how many of the searched ingredients they use.

    Args:
        search_ingredients: Raw ingredient strings entered by the user
        recipes: Recipes with an ``ingredients`` collection, as fetched

    Returns:
        MatchResult(exact, related), each a list of ScoredRecipe sorted by
        score descending. Recipes with equal scores keep their input order.

    Raises:
        InputUnavailable: If ``recipes`` is None (the fetch produced nothing)
    """
    if recipes is None:
        raise InputUnavailable('Recipe collection is unavailable')

    terms = unique_search_terms(search_ingredients)
    if not terms:
        return MatchResult(exact=[], related=[])

    scored = [score_recipe(terms, recipe) for recipe in recipes]
    # sorted() is stable, including with reverse=True
    ranked = sorted((s for s in scored if s.match_count > 0),
                    key=attrgetter('score'), reverse=True)

    exact = [s for s in ranked if s.match_count == len(terms)]
    exact_ids = {s.id for s in exact if s.id is not None}
    related = [
        s for s in ranked
        if s.match_count < len(terms) and (s.id is None or s.id not in exact_ids)
    ]

    return MatchResult(exact=exact, related=related)
