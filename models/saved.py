"""
Saved Recipe Model

Contains the SavedRecipe model linking a user to the recipes they favorited.
"""

from datetime import datetime, timezone

from .base import db


class SavedRecipe(db.Model):
    """A user's favorite; each (user, recipe) pair is stored once."""
    __table_args__ = (
        db.UniqueConstraint('user_id', 'recipe_id', name='uq_saved_recipe_user_recipe'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(100), nullable=False, index=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'),
                          nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    recipe = db.relationship('Recipe', backref=db.backref('saved_by', cascade='all, delete-orphan'))
