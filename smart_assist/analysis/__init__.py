"""
Visual Analysis

Pixel statistics and the deterministic heuristic classifier built on them.
"""

from .heuristics import BRIGHTNESS_THRESHOLD, SUMMARY, VARIANCE_THRESHOLD, classify
from .image import load_pixels, stats_from_image
from .stats import InvalidPixelData, compute_stats

__all__ = [
    "BRIGHTNESS_THRESHOLD",
    "VARIANCE_THRESHOLD",
    "SUMMARY",
    "InvalidPixelData",
    "classify",
    "compute_stats",
    "load_pixels",
    "stats_from_image",
]
