"""
Heuristic Review Provider

Deterministic "visual" mode backed by the threshold classifier.
"""

from ..analysis import classify
from ..models import AnalysisResult, VisualStats
from .base import ReviewProvider


class HeuristicProvider(ReviewProvider):
    """Explainable findings computed from brightness and variance alone."""

    @property
    def name(self) -> str:
        return "heuristic"

    def is_available(self) -> bool:
        return True

    def review(self, stats: VisualStats, platform: str) -> AnalysisResult:
        return classify(stats, platform)
