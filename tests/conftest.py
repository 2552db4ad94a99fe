"""Shared fixtures for tests."""

import os
import pytest
from typing import Optional

from code_de_chart.models import ChartRequest, Completion
from code_de_chart.config import ModelProvider, get_ollama_base_url


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (may require external services)"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )


# ============================================================================
# Environment Detection Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def ollama_available() -> bool:
    """Check if Ollama server is available."""
    import httpx

    base_url = get_ollama_base_url().replace("/v1", "")
    try:
        response = httpx.get(f"{base_url}/api/tags", timeout=5.0)
        return response.status_code == 200
    except Exception:
        return False


@pytest.fixture(scope="session")
def openai_available() -> bool:
    """Check if OpenAI API key is configured."""
    api_key = os.environ.get("OPENAI_API_KEY", "")
    return api_key.startswith("sk-") and len(api_key) > 20


@pytest.fixture(scope="session")
def groq_available() -> bool:
    """Check if Groq API key is configured."""
    return os.environ.get("GROQ_API_KEY", "").startswith("gsk_")


@pytest.fixture(scope="session")
def current_provider() -> ModelProvider:
    """Get the current model provider from environment."""
    return ModelProvider.from_env()


@pytest.fixture
def require_ollama(ollama_available):
    """Skip test if Ollama is not available."""
    if not ollama_available:
        pytest.skip("Ollama server not available")


@pytest.fixture
def require_openai(openai_available):
    """Skip test if OpenAI is not configured."""
    if not openai_available:
        pytest.skip("OpenAI API key not configured")


@pytest.fixture
def require_groq(groq_available):
    """Skip test if Groq is not configured."""
    if not groq_available:
        pytest.skip("Groq API key not configured")


@pytest.fixture
def require_llm(ollama_available, openai_available, groq_available, current_provider):
    """Skip test if no LLM provider is available."""
    if current_provider == ModelProvider.OLLAMA and not ollama_available:
        pytest.skip("Ollama server not available")
    if current_provider == ModelProvider.OPENAI and not openai_available:
        pytest.skip("OpenAI API key not configured")
    if current_provider == ModelProvider.GROQ and not groq_available:
        pytest.skip("Groq API key not configured")


# ============================================================================
# Completer Fakes
# ============================================================================

class FakeCompleter:
    """Returns a canned Completion and records the prompts it was given."""

    def __init__(self, content: str = "", success: bool = True, error: Optional[str] = None):
        self.completion = Completion(success=success, content=content, error=error, model="fake:model")
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> Completion:
        self.prompts.append(prompt)
        return self.completion


class RaisingCompleter:
    """A misbehaving completer that raises instead of reporting failure."""

    async def complete(self, prompt: str) -> Completion:
        raise RuntimeError("connection reset")


@pytest.fixture
def fake_completer():
    """Factory for FakeCompleter instances."""
    return FakeCompleter


@pytest.fixture
def failing_completer() -> FakeCompleter:
    return FakeCompleter(success=False, error="GROQ_API_KEY environment variable is required")


@pytest.fixture
def raising_completer() -> RaisingCompleter:
    return RaisingCompleter()


# ============================================================================
# Completion Fixtures
# ============================================================================

@pytest.fixture
def flowchart_completion() -> str:
    """A typical flowchart answer with prose around the fenced block."""
    return (
        "Here is the flowchart you asked for:\n\n"
        "```mermaid\n"
        "flowchart TD\n"
        " A([Start]) --> B[Process]\n"
        " B --> C{Decide?}\n"
        " C -->|Yes| D([End])\n"
        "```\n\n"
        "Let me know if you need changes."
    )


@pytest.fixture
def gantt_completion() -> str:
    return (
        "```mermaid\n"
        "gantt\n"
        "    title Website Launch\n"
        "    dateFormat YYYY-MM-DD\n"
        "    section Planning\n"
        "    Requirements :done, req, 2024-01-01, 7d\n"
        "```"
    )


@pytest.fixture
def mindmap_completion() -> str:
    return (
        "```mermaid\n"
        "mindmap\n"
        "  root((Photosynthesis))\n"
        "    Inputs\n"
        "      Sunlight\n"
        "      Water\n"
        "    Outputs\n"
        "      Oxygen\n"
        "```"
    )


@pytest.fixture
def garbage_completion() -> str:
    return "I'm sorry, I cannot help with drawing charts today."


@pytest.fixture
def gantt_request() -> ChartRequest:
    return ChartRequest(text="Plan a 3-phase project with milestones", chart_type="gantt")
