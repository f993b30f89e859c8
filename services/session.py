"""
Search Session State

The ingredients a user has picked and the current result set, held as an
immutable value. Every transition returns a new state; the Flask layer
stores it in the cookie session between requests.
"""

from typing import NamedTuple

from constants import MAX_LENGTHS

from .matching import normalize_search_ingredient, unique_search_terms
from .rotation import rotate


def _search_term(raw):
    """Normalize a term and cap its length so the session cookie stays small."""
    return normalize_search_ingredient(raw)[:MAX_LENGTHS['search_ingredient']].rstrip()


class SearchState(NamedTuple):
    ingredients: tuple = ()
    rotation: int = 0

    def to_dict(self):
        return {'ingredients': list(self.ingredients), 'rotation': self.rotation}

    @classmethod
    def from_dict(cls, data):
        """Rebuild a state from session data, falling back to empty on junk."""
        if not isinstance(data, dict):
            return cls()
        ingredients = data.get('ingredients')
        if not isinstance(ingredients, (list, tuple)):
            ingredients = ()
        rotation = data.get('rotation', 0)
        if not isinstance(rotation, int) or isinstance(rotation, bool) or rotation < 0:
            rotation = 0
        terms = unique_search_terms(_search_term(i) for i in ingredients)
        return cls(ingredients=tuple(terms), rotation=rotation)


def add_ingredient(state, raw):
    """Add a search ingredient. Blank and duplicate entries leave the state unchanged."""
    term = _search_term(raw)
    if not term or term in state.ingredients:
        return state
    return SearchState(ingredients=state.ingredients + (term,), rotation=0)


def remove_ingredient(state, raw):
    term = _search_term(raw)
    if term not in state.ingredients:
        return state
    remaining = tuple(i for i in state.ingredients if i != term)
    return SearchState(ingredients=remaining, rotation=0)


def shuffle(state):
    return state._replace(rotation=rotate(state.rotation))


def clear(state):
    return SearchState()
