"""
Shared fixtures: an application on an in-memory database, its test client,
and a helper for creating recipes.
"""

import pytest

from app import create_app
from models import db
from services import create_recipe


@pytest.fixture
def app(tmp_path):
    app = create_app('testing', {'UPLOAD_FOLDER': str(tmp_path / 'uploads')})
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_recipe(app):
    """Create a recipe from a name and a list of ingredient names."""
    def _make(name, ingredients, user_id='user123', steps=('Cook it.',), **fields):
        data = {'name': name, 'cooking_time': '30 min', 'yield': '4 servings'}
        data.update(fields)
        rows = [{'amount': '1', 'ingredient': i} for i in ingredients]
        return create_recipe(data, rows, list(steps), user_id=user_id)
    return _make
