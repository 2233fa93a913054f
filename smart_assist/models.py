"""
Data Models for Smart Assist

Pydantic models for visual statistics, findings and analysis results.
Serialized shape matches what the UI consumes: {"issues": [...], "summary": "..."}.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


Severity = Literal["High", "Medium", "Low"]


class VisualStats(BaseModel):
    """
    Brightness statistics of a screenshot.

    Attributes:
        brightness: Mean of the per-pixel RGB average (0-255)
        variance: Population variance of the per-pixel RGB average
    """

    model_config = ConfigDict(frozen=True)

    brightness: float = Field(ge=0, le=255)
    variance: float = Field(ge=0)


class Finding(BaseModel):
    """
    A single UX observation.

    Attributes:
        title: Short headline for the finding
        severity: How important this is to fix
        description: What was observed
        suggestion: Actionable recommendation
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    severity: Severity
    description: str
    suggestion: str

    @field_validator("severity", mode="before")
    @classmethod
    def normalize_severity(cls, v):
        """Accept 'high', 'HIGH', ' High ' etc."""
        if isinstance(v, str):
            return v.strip().capitalize()
        return v


class AnalysisResult(BaseModel):
    """
    Findings plus a one-line summary, produced fresh per request.

    The findings list is exposed as ``issues`` when serialized.
    """

    model_config = ConfigDict(populate_by_name=True)

    findings: list[Finding] = Field(default_factory=list, alias="issues")
    summary: str = ""

    def to_payload(self) -> dict:
        """Serialize to the {"issues", "summary"} JSON shape"""
        return self.model_dump(by_alias=True)


class Config(BaseModel):
    """
    Configuration for Smart Assist.

    Loaded from .env file and environment variables.

    Attributes:
        mode: Default analysis mode ("visual" heuristics or "ai" via local LLM)
        platform: Platform label woven into suggestions (e.g. React, Vue)
        ollama_host: Ollama server URL
        ollama_model: Model name for Ollama
        ollama_timeout: Seconds to wait for a generation
        log_level: Logging level name
    """

    mode: Literal["visual", "ai"] = "visual"
    platform: str = Field(default="React", min_length=1)
    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "phi3"
    ollama_timeout: float = Field(default=120, ge=1, le=600)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v
