"""
Base Review Provider Interface

Abstract base class defining the contract for UX review back-ends.
All providers turn the same visual statistics into an AnalysisResult.
"""

from abc import ABC, abstractmethod

from ..models import AnalysisResult, VisualStats


class ReviewProvider(ABC):
    """
    Abstract base class for review providers.

    Subclasses must implement:
    - review(): Turn visual statistics into findings
    - is_available(): Check if provider is configured and ready
    - name: Property returning provider name
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Provider name for logging and identification.

        Returns:
            Provider name (e.g., "heuristic", "local")
        """
        pass

    @abstractmethod
    def review(self, stats: VisualStats, platform: str) -> AnalysisResult:
        """
        Produce UX findings for a screenshot's visual statistics.

        Args:
            stats: Brightness and variance of the screenshot
            platform: Platform label for tailored suggestions (e.g. "React")

        Returns:
            AnalysisResult with findings and a summary

        Raises:
            RuntimeError: If the back-end fails or its answer is unusable
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if provider is ready to use.

        Returns:
            True if provider can be used, False otherwise
        """
        pass

    def _build_review_prompt(self, stats: VisualStats, platform: str) -> str:
        """
        Build the UX review prompt for generative providers.

        Args:
            stats: Visual statistics to describe
            platform: Platform label to optimize advice for

        Returns:
            Prompt text requesting strict JSON
        """
        return f"""You are a senior UX designer.

Visual signals:
- Average brightness: {stats.brightness}
- Brightness variance: {stats.variance}

Generate UX feedback with severity and actionable suggestions.
Optimize for {platform}.
Return STRICT JSON in this shape:
{{
  "issues": [
    {{
      "title": "<short title>",
      "severity": "<High|Medium|Low>",
      "description": "<problem>",
      "suggestion": "<fix>"
    }}
  ],
  "summary": "<one sentence>"
}}"""
