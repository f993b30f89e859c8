"""
Recipe Image Module

Stores uploaded recipe photos under a random file name. Every upload is
decoded and re-encoded as JPEG through PIL, so only real pixel data reaches
the upload folder.
"""

import os
import uuid
from io import BytesIO

from PIL import Image

from constants import ALLOWED_EXTENSIONS


class ImageValidationError(Exception):
    """Raised when an image fails validation."""
    pass


# Maximum upload size (10MB)
MAX_FILE_SIZE = 10 * 1024 * 1024

# Longest side of a stored photo
MAX_STORED_SIZE = (2048, 2048)

# PIL format names matching ALLOWED_EXTENSIONS
_FORMAT_EXTENSIONS = {'JPEG': {'jpg', 'jpeg'}, 'PNG': {'png'}, 'GIF': {'gif'}, 'WEBP': {'webp'}}


def allowed_file(filename):
    return bool(filename) and '.' in filename and \
        filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def _read_upload(image_data):
    if isinstance(image_data, bytes):
        content = image_data
    else:
        image_data.seek(0)
        content = image_data.read()
    if not content:
        raise ImageValidationError("Image is empty")
    if len(content) > MAX_FILE_SIZE:
        raise ImageValidationError(f"Image too large: {len(content)} bytes (max {MAX_FILE_SIZE})")
    return content


def _open_image(content):
    """Decode uploaded bytes, checking the content is an allowed image type."""
    Image.open(BytesIO(content)).verify()
    # verify() leaves the image unusable
    img = Image.open(BytesIO(content))
    if not _FORMAT_EXTENSIONS.get(img.format, set()) & ALLOWED_EXTENSIONS:
        raise ImageValidationError(f"Unsupported image format: {img.format}")
    return img


def _to_rgb(img):
    """JPEG has no alpha channel; transparent areas become white."""
    if img.mode == 'RGB':
        return img
    if img.mode not in ('RGBA', 'LA', 'P'):
        return img.convert('RGB')
    img = img.convert('RGBA')
    background = Image.new('RGB', img.size, (255, 255, 255))
    background.paste(img, mask=img.getchannel('A'))
    return background


def save_recipe_image(image_data, upload_folder, max_size=MAX_STORED_SIZE):
    """
    Validate an uploaded recipe image and save it as JPEG.

    Args:
        image_data: Raw image bytes or a file-like object (e.g. FileStorage)
        upload_folder: Directory the image is written to
        max_size: (width, height) the photo is scaled down to fit

    Returns:
        str: The generated file name, relative to ``upload_folder``

    Raises:
        ImageValidationError: If the upload is not a usable image
    """
    content = _read_upload(image_data)

    try:
        img = _open_image(content)
        img.thumbnail(max_size, Image.Resampling.LANCZOS)
        img = _to_rgb(img)
    except ImageValidationError:
        raise
    except Image.DecompressionBombError as e:
        raise ImageValidationError("Image is too large when decoded") from e
    except Exception as e:
        raise ImageValidationError(f"Invalid or corrupted image: {e}") from e

    os.makedirs(upload_folder, exist_ok=True)
    filename = f"{uuid.uuid4().hex}.jpg"
    img.save(os.path.join(upload_folder, filename), 'JPEG', quality=85, optimize=True)
    return filename
