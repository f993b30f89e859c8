"""
Recipe Models

Contains the Recipe, RecipeIngredient and Instruction models for managing
recipes, their free-text ingredient lines and their numbered steps.
"""

from datetime import datetime, timezone

from .base import db


def _utcnow():
    return datetime.now(timezone.utc)


class Recipe(db.Model):
    """Recipe with metadata, ingredient lines and ordered instructions."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    temperature = db.Column(db.Integer, nullable=True)
    cooking_time = db.Column(db.String(50), nullable=False)
    # "yield" is a Python keyword, so the attribute carries a trailing underscore
    yield_ = db.Column('yield', db.String(50), nullable=False)
    notes = db.Column(db.Text, nullable=True)
    is_public = db.Column(db.Boolean, default=True, nullable=False)
    user_id = db.Column(db.String(100), nullable=True, index=True)
    image_url = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False, index=True)
    ingredients = db.relationship('RecipeIngredient', backref='recipe', lazy=True,
                                  cascade='all, delete-orphan')
    instructions = db.relationship('Instruction', backref='recipe', lazy=True,
                                   cascade='all, delete-orphan',
                                   order_by='Instruction.step_number')

    def to_dict(self, include_details=True):
        data = {
            'id': self.id,
            'name': self.name,
            'temperature': self.temperature,
            'cooking_time': self.cooking_time,
            'yield': self.yield_,
            'notes': self.notes,
            'is_public': self.is_public,
            'user_id': self.user_id,
            'image_url': self.image_url,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
        if include_details:
            data['ingredients'] = [ri.to_dict() for ri in self.ingredients]
            data['instructions'] = [step.to_dict() for step in self.instructions]
        return data


class RecipeIngredient(db.Model):
    """Free-text ingredient line (e.g. '2 cups' of 'flour') owned by a recipe."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'),
                          nullable=False, index=True)
    amount = db.Column(db.String(100), nullable=False, default='')
    ingredient = db.Column(db.String(200), nullable=False, index=True)

    def to_dict(self):
        return {'id': self.id, 'amount': self.amount, 'ingredient': self.ingredient}


class Instruction(db.Model):
    """One numbered step of a recipe's method."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'),
                          nullable=False, index=True)
    step_number = db.Column(db.Integer, nullable=False)
    instruction = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {'id': self.id, 'step_number': self.step_number, 'instruction': self.instruction}
