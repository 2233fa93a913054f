"""
Screenshot decoding with Pillow.
"""

import io
import logging
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from ..models import VisualStats
from .stats import InvalidPixelData, compute_stats


logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes]


def load_pixels(source: ImageSource) -> bytes:
    """
    Decode an image into a flat RGBA byte buffer.

    Args:
        source: Path to an image file, or the raw encoded image bytes

    Returns:
        RGBA bytes, 4 per pixel, row-major

    Raises:
        FileNotFoundError: If a path is given and does not exist
        InvalidPixelData: If the data is not a decodable image
    """
    if isinstance(source, bytes):
        handle = io.BytesIO(source)
    else:
        handle = Path(source)
        if not handle.exists():
            raise FileNotFoundError(f"Screenshot not found: {handle}")

    try:
        with Image.open(handle) as image:
            logger.debug("Decoded %s image %sx%s", image.mode, image.width, image.height)
            return image.convert("RGBA").tobytes()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidPixelData(f"Could not decode image: {e}") from e


def stats_from_image(source: ImageSource) -> VisualStats:
    """Decode an image and compute its brightness statistics."""
    return compute_stats(load_pixels(source))
