import pytest
from werkzeug.datastructures import MultiDict

from services.parsing import (
    safe_int, parse_temperature, parse_bool, parse_ingredient_rows, parse_recipe_form,
)


@pytest.mark.parametrize('value, expected', [
    ('12', 12),
    ('12.7', 12),
    (3.0, 3),
    ('', None),
    (None, None),
    ('abc', None),
    ('nan', None),
    ('inf', None),
    ('-inf', None),
    (float('inf'), None),
    ('1e400', None),
])
def test_safe_int(value, expected):
    assert safe_int(value) == expected


def test_safe_int_bounds_and_default():
    assert safe_int('-5', min_val=0) == 0
    assert safe_int('50', max_val=10) == 10
    assert safe_int(float('inf'), default=0, min_val=0) == 0


def test_parse_temperature():
    assert parse_temperature('180') == 180
    assert parse_temperature('5000') == 1000
    assert parse_temperature('hot') is None
    assert parse_temperature('inf') is None


def test_parse_bool():
    assert parse_bool('on') is True
    assert parse_bool('false') is False
    assert parse_bool(None) is True
    assert parse_bool('', default=False) is False


def test_parse_ingredient_rows_accepts_several_shapes():
    rows = parse_ingredient_rows([
        {'amount': ' 2 ', 'ingredient': ' eggs '},
        ('1 cup', 'flour'),
        'salt',
        {'amount': '1', 'ingredient': '   '},
        42,
    ])
    assert rows == [
        {'amount': '2', 'ingredient': 'eggs'},
        {'amount': '1 cup', 'ingredient': 'flour'},
        {'amount': '', 'ingredient': 'salt'},
    ]


def test_parse_recipe_form():
    form = MultiDict([
        ('name', 'Toast'), ('cooking_time', '5 min'), ('yield', '1'), ('temperature', '200'),
        ('amount', '1 slice'), ('ingredient', 'bread'),
        ('amount', ''), ('ingredient', 'butter'),
        ('instruction', 'Toast'), ('instruction', 'Butter'),
    ])
    fields, ingredients, instructions = parse_recipe_form(form)
    assert fields['name'] == 'Toast'
    assert fields['temperature'] == '200'
    assert [i['ingredient'] for i in ingredients] == ['bread', 'butter']
    assert instructions == ['Toast', 'Butter']
