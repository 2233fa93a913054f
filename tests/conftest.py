import io

import pytest
from PIL import Image

from smart_assist.models import Config


CONFIG_ENV_VARS = (
    "ANALYSIS_MODE",
    "PLATFORM",
    "OLLAMA_HOST",
    "OLLAMA_MODEL",
    "OLLAMA_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's .env files and environment."""
    # setenv first so that values written later by load_dotenv are undone too
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def png_bytes():
    def make(color=(200, 200, 200), size=(4, 4), mode="RGB"):
        buffer = io.BytesIO()
        Image.new(mode, size, color).save(buffer, format="PNG")
        return buffer.getvalue()

    return make
