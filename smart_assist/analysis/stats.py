"""
Visual Statistics Extractor

Computes mean brightness and brightness variance from raw RGBA pixel data.
Brightness of a pixel is the plain average of its R, G and B channels.
"""

from typing import Sequence, Union

import numpy as np

from ..models import VisualStats


CHANNELS = 4  # R, G, B, A

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray, Sequence[int]]


class InvalidPixelData(ValueError):
    """Raised when a pixel buffer cannot be analyzed."""


def _as_array(pixels: PixelBuffer) -> np.ndarray:
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        return np.frombuffer(pixels, dtype=np.uint8)
    return np.asarray(pixels, dtype=np.int64).ravel()


def compute_stats(pixels: PixelBuffer) -> VisualStats:
    """
    Compute brightness statistics for a flat RGBA buffer.

    The mean comes from the integer channel total, the variance is the
    population variance (ddof=0) of the per-pixel brightness around it.

    Args:
        pixels: Flat channel sequence, 4 values per pixel, each in [0, 255]

    Returns:
        VisualStats with brightness in [0, 255] and variance >= 0

    Raises:
        InvalidPixelData: If the buffer is empty or not a whole number of pixels

    Example:
        stats = compute_stats(bytes([255, 255, 255, 255] * 4))
        assert stats.brightness == 255.0 and stats.variance == 0.0
    """
    flat = _as_array(pixels)
    length = flat.size
    if length == 0:
        raise InvalidPixelData("Pixel buffer is empty")
    if length % CHANNELS:
        raise InvalidPixelData(
            f"Pixel buffer length {length} is not a multiple of {CHANNELS}"
        )

    # Channel sums stay integral so the mean is exact for uniform images
    sums = flat.reshape(-1, CHANNELS)[:, :3].sum(axis=1, dtype=np.int64)
    brightness = float(sums.sum()) / (3 * sums.size)
    variance = float(np.mean((sums / 3 - brightness) ** 2))

    return VisualStats(brightness=brightness, variance=variance)
