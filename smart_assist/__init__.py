"""
Smart Assist - UX Feedback from UI Screenshots

Upload a UI screenshot and get UX feedback from either:
- Visual heuristics (brightness and variance thresholds)
- A local LLM (Ollama/Phi-3) fed the same statistics
"""

from .analysis import InvalidPixelData, classify, compute_stats
from .analyzer import UIAnalyzer
from .models import AnalysisResult, Finding, VisualStats

__version__ = "0.1.0"
__all__ = [
    "AnalysisResult",
    "Finding",
    "InvalidPixelData",
    "UIAnalyzer",
    "VisualStats",
    "classify",
    "compute_stats",
]
