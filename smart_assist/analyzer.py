"""
UI Analyzer Orchestrator

Coordinates screenshot decoding, statistics extraction and the review
provider to produce an AnalysisResult.
"""

import logging
from typing import Optional

from .analysis import compute_stats, load_pixels
from .analysis.image import ImageSource
from .analysis.stats import PixelBuffer
from .models import AnalysisResult, Config, VisualStats
from .providers.base import ReviewProvider


logger = logging.getLogger(__name__)

FAILURE_SUMMARY = "Analysis failed."


class UIAnalyzer:
    """
    Orchestrates the screenshot analysis workflow.

    Coordinates:
    1. Image decoding (via Pillow)
    2. Brightness statistics
    3. Review provider (heuristic or local LLM)

    A provider failure degrades to an empty result with a generic summary
    instead of propagating. Bad input still raises.

    Example:
        config = load_config()
        analyzer = UIAnalyzer(get_provider(config.mode, config), config)
        result = analyzer.analyze_image("screenshot.png", platform="Vue")
        print(result.summary)
    """

    def __init__(self, provider: ReviewProvider, config: Config):
        """
        Initialize analyzer.

        Args:
            provider: Configured review provider
            config: Configuration supplying the default platform label
        """
        self.provider = provider
        self.config = config

    def analyze_image(
        self,
        source: ImageSource,
        platform: Optional[str] = None
    ) -> AnalysisResult:
        """
        Analyze an encoded screenshot.

        Args:
            source: Image path or raw image bytes
            platform: Platform label; defaults to config.platform

        Returns:
            AnalysisResult from the provider, or the failure result

        Raises:
            FileNotFoundError: If the image path does not exist
            InvalidPixelData: If the image cannot be decoded or is empty
        """
        return self.analyze_pixels(load_pixels(source), platform)

    def analyze_pixels(
        self,
        pixels: PixelBuffer,
        platform: Optional[str] = None
    ) -> AnalysisResult:
        """
        Analyze an already-decoded flat RGBA buffer.

        Raises:
            InvalidPixelData: If the buffer is empty or malformed
        """
        return self.analyze_stats(compute_stats(pixels), platform)

    def analyze_stats(
        self,
        stats: VisualStats,
        platform: Optional[str] = None
    ) -> AnalysisResult:
        """Run the provider on precomputed statistics."""
        platform = platform or self.config.platform
        logger.info(
            "Reviewing with %s provider: brightness=%.2f variance=%.2f platform=%s",
            self.provider.name, stats.brightness, stats.variance, platform
        )

        try:
            return self.provider.review(stats, platform)
        except RuntimeError as e:
            logger.error("%s provider failed: %s", self.provider.name, e)
            return AnalysisResult(findings=[], summary=FAILURE_SUMMARY)
