"""
Local LLM Review Provider

Implements "ai" mode using a local LLM via Ollama (Phi-3 by default).
The model only sees the brightness statistics, never the pixels.
"""

import json
import logging

import requests
from pydantic import ValidationError

from ..models import AnalysisResult, Finding, VisualStats
from .base import ReviewProvider


logger = logging.getLogger(__name__)


class LocalProvider(ReviewProvider):
    """
    Review provider using local LLMs through Ollama.

    Requirements:
    - Ollama installed (https://ollama.ai/)
    - Model pulled (e.g., `ollama pull phi3`)

    Example:
        provider = LocalProvider(host="http://localhost:11434", model="phi3")
        result = provider.review(stats, "React")
    """

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "phi3",
        timeout: float = 120
    ):
        """
        Initialize local LLM provider.

        Args:
            host: Ollama server URL (default: http://localhost:11434)
            model: Model name (default: phi3)
            timeout: Seconds to wait for a generation. Local models can be slow.
        """
        self.host = host.rstrip("/")
        self.model = model
        self.timeout = timeout

    @property
    def name(self) -> str:
        """Provider name for identification"""
        return "local"

    def is_available(self) -> bool:
        """
        Check if Ollama server is running.

        Returns:
            True if server is reachable, False otherwise
        """
        try:
            response = requests.get(f"{self.host}/api/tags", timeout=2)
            return response.status_code == 200
        except requests.RequestException:
            return False

    def review(self, stats: VisualStats, platform: str) -> AnalysisResult:
        """
        Ask the local model for UX feedback on the given statistics.

        Args:
            stats: Brightness and variance of the screenshot
            platform: Platform label to optimize advice for

        Returns:
            AnalysisResult built from the model's JSON answer

        Raises:
            RuntimeError: If Ollama is unreachable, the request fails,
                or the answer holds no parseable JSON
        """
        prompt = self._build_review_prompt(stats, platform)

        try:
            response = requests.post(
                f"{self.host}/api/generate",
                json={
                    "model": self.model,
                    "prompt": prompt,
                    "stream": False,
                },
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise RuntimeError(
                f"Failed to connect to Ollama at {self.host}: {str(e)}. "
                f"Make sure Ollama is running: `ollama serve`"
            ) from e

        if response.status_code != 200:
            raise RuntimeError(f"Ollama API error: {response.text}")

        try:
            body = response.json()
        except ValueError as e:
            raise RuntimeError(f"Ollama returned a non-JSON body: {str(e)}") from e

        if not isinstance(body, dict):
            raise RuntimeError(f"Unexpected Ollama body: {type(body).__name__}")

        response_text = body.get("response") or ""
        if not isinstance(response_text, str):
            raise RuntimeError(f"Unexpected response field: {type(response_text).__name__}")

        logger.debug("Raw LLM response: %s", response_text)

        return self._parse_response(response_text)

    def _parse_response(self, response_text: str) -> AnalysisResult:
        """
        Parse the model's answer into an AnalysisResult.

        Lenient: JSON may be wrapped in a code fence or prose, issues that
        don't fit the Finding schema are dropped, a missing summary is empty.

        Args:
            response_text: Raw response text

        Returns:
            Validated AnalysisResult

        Raises:
            RuntimeError: If no JSON object can be recovered
        """
        if "```json" in response_text:
            start = response_text.find("```json") + 7
            json_text = self._until_fence(response_text, start)
        elif "```" in response_text:
            start = response_text.find("```") + 3
            json_text = self._until_fence(response_text, start)
        elif "{" in response_text and "}" in response_text:
            start = response_text.find("{")
            end = response_text.rfind("}") + 1
            json_text = response_text[start:end].strip()
        else:
            json_text = response_text.strip()

        try:
            data = json.loads(json_text)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Model returned malformed JSON: {str(e)}") from e

        if not isinstance(data, dict):
            raise RuntimeError(f"Expected a JSON object, got {type(data).__name__}")

        raw_issues = data.get("issues", [])
        if not isinstance(raw_issues, list):
            logger.warning("Ignoring non-list 'issues' in model output")
            raw_issues = []

        findings = []
        for raw in raw_issues:
            try:
                findings.append(Finding.model_validate(raw))
            except ValidationError as e:
                logger.warning("Dropping malformed issue %r: %s", raw, e.errors()[0]["msg"])

        summary = data.get("summary") or ""
        if not isinstance(summary, str):
            summary = str(summary)

        return AnalysisResult(findings=findings, summary=summary)

    @staticmethod
    def _until_fence(text: str, start: int) -> str:
        """Text from start up to the closing fence, or to the end if unclosed"""
        end = text.find("```", start)
        if end == -1:
            end = len(text)
        return text[start:end].strip()
