"""
Input Sanitization Module

Cleans recipe form input before it is stored. Text is kept as the user typed
it, minus control characters and surrounding whitespace, so that ingredient
search and autocomplete see the real names. Escaping is left to whatever
renders the JSON.
"""

import re

from constants import MAX_LENGTHS

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text by stripping control characters and truncating.

    Newlines and tabs are preserved.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text.strip())

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_line(text, max_length):
    """Sanitize single-line input such as a name or an amount."""
    text = sanitize_text(text, max_length=max_length)
    # Collapse newlines and runs of spaces
    return re.sub(r'\s+', ' ', text)


def sanitize_recipe_name(name):
    return sanitize_line(name, MAX_LENGTHS['recipe_name'])


def sanitize_ingredient(amount, ingredient):
    """Sanitize one ingredient line, returning (amount, ingredient)."""
    return (
        sanitize_line(amount, MAX_LENGTHS['ingredient_amount']),
        sanitize_line(ingredient, MAX_LENGTHS['ingredient_name']),
    )


def sanitize_instruction(text):
    return sanitize_text(text, max_length=MAX_LENGTHS['instruction'])


def sanitize_notes(notes):
    """Notes are optional; blank input becomes None."""
    return sanitize_text(notes, max_length=MAX_LENGTHS['notes']) or None
