"""
Review Provider Implementations

Pluggable back-ends following a common interface:
deterministic heuristics ("visual" mode) and a local LLM ("ai" mode).
"""

from .base import ReviewProvider
from .heuristic import HeuristicProvider
from .local import LocalProvider

__all__ = [
    "ReviewProvider",
    "HeuristicProvider",
    "LocalProvider",
    "get_provider",
]


def get_provider(mode: str, config) -> ReviewProvider:
    """
    Factory function to get a configured review provider.

    Args:
        mode: "visual" for heuristics or "ai" for the local LLM
        config: Configuration object with Ollama settings

    Returns:
        Configured review provider instance

    Raises:
        ValueError: If mode is unknown

    Example:
        provider = get_provider("ai", config)
        result = provider.review(stats, "React")
    """
    if mode == "visual":
        return HeuristicProvider()

    elif mode == "ai":
        return LocalProvider(
            host=config.ollama_host,
            model=config.ollama_model,
            timeout=config.ollama_timeout
        )

    else:
        raise ValueError(
            f"Unknown mode: {mode}. "
            f"Choose from: visual, ai"
        )
