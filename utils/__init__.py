# Utility modules for Pantry Chef
from .image_handler import save_recipe_image, allowed_file, ImageValidationError
from .sanitizer import (
    sanitize_text, sanitize_line, sanitize_recipe_name,
    sanitize_ingredient, sanitize_instruction, sanitize_notes
)
