"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .recipe import Recipe, RecipeIngredient, Instruction
from .saved import SavedRecipe

__all__ = [
    'db',
    'Recipe',
    'RecipeIngredient',
    'Instruction',
    'SavedRecipe',
]
