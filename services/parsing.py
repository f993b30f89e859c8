"""
Parsing Service

Functions for turning submitted recipe form data (JSON bodies or HTML form
fields) into plain values the recipe store accepts.
"""

from constants import MIN_TEMPERATURE, MAX_TEMPERATURE


def safe_int(value, default=None, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    if value is None or value == '':
        return default
    try:
        result = int(float(value))
    except (ValueError, TypeError, OverflowError):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def parse_temperature(value):
    """Temperature is optional; anything unparseable becomes None."""
    return safe_int(value, default=None, min_val=MIN_TEMPERATURE, max_val=MAX_TEMPERATURE)


def parse_bool(value, default=True):
    """Parse checkbox / JSON booleans ('on', 'true', '1', True)."""
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'on', 'yes')


def parse_ingredient_rows(rows):
    """
    Normalize ingredient input into a list of {'amount', 'ingredient'} dicts.

    Accepts dicts, (amount, ingredient) pairs, or bare ingredient strings.
    Rows without an ingredient name are dropped, as empty form rows are.
    """
    parsed = []
    for row in rows or ():
        if isinstance(row, dict):
            amount, name = row.get('amount', ''), row.get('ingredient', '')
        elif isinstance(row, (list, tuple)) and len(row) == 2:
            amount, name = row
        elif isinstance(row, str):
            amount, name = '', row
        else:
            continue
        name = name.strip() if isinstance(name, str) else ''
        if not name:
            continue
        amount = amount.strip() if isinstance(amount, str) else ''
        parsed.append({'amount': amount, 'ingredient': name})
    return parsed


def parse_instruction_rows(rows):
    """Normalize instructions into a list of step strings, dropping blanks."""
    steps = []
    for row in rows or ():
        text = row.get('instruction', '') if isinstance(row, dict) else row
        if isinstance(text, str) and text.strip():
            steps.append(text.strip())
    return steps


def parse_recipe_form(form):
    """
    Read an HTML form (a werkzeug MultiDict) into create_recipe arguments.

    Ingredient lines arrive as parallel ``amount`` / ``ingredient`` lists and
    steps as a repeated ``instruction`` field.

    Returns:
        (fields, ingredients, instructions)
    """
    fields = {
        'name': form.get('name', ''),
        'temperature': form.get('temperature'),
        'cooking_time': form.get('cooking_time', ''),
        'yield': form.get('yield', ''),
        'notes': form.get('notes', ''),
        'is_public': form.get('is_public'),
    }
    names = form.getlist('ingredient')
    amounts = form.getlist('amount')
    amounts += [''] * (len(names) - len(amounts))
    ingredients = parse_ingredient_rows(list(zip(amounts, names)))
    instructions = parse_instruction_rows(form.getlist('instruction'))
    return fields, ingredients, instructions
