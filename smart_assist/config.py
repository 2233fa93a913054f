"""
Configuration Management

Loads configuration from .env files and provides a typed Config object.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import Config


def load_config(env_file: Optional[Path] = None) -> Config:
    """
    Load configuration from .env file and environment variables.

    Searches for .env file in:
    1. Provided env_file path
    2. Current directory
    3. User's home directory

    Environment variables override .env file values.

    Args:
        env_file: Optional path to .env file

    Returns:
        Config object with all settings

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value

    Example:
        config = load_config()
        provider = get_provider(config.mode, config)
    """
    if env_file and env_file.exists():
        load_dotenv(env_file)
    elif Path(".env").exists():
        load_dotenv(".env")
    elif (Path.home() / ".env").exists():
        load_dotenv(Path.home() / ".env")

    return Config(
        mode=os.getenv("ANALYSIS_MODE", "visual"),
        platform=os.getenv("PLATFORM", "React"),
        ollama_host=os.getenv("OLLAMA_HOST", "http://localhost:11434"),
        ollama_model=os.getenv("OLLAMA_MODEL", "phi3"),
        ollama_timeout=float(os.getenv("OLLAMA_TIMEOUT", "120")),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
    )
