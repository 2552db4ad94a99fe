"""LLM configuration."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ModelProvider(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    OLLAMA = "ollama"
    GROQ = "groq"

    @classmethod
    def from_env(cls) -> "ModelProvider":
        """Detect provider from environment."""
        explicit = os.getenv("LLM_PROVIDER", "").lower()
        if explicit in {p.value for p in cls}:
            return cls(explicit)
        if os.getenv("OPENAI_API_KEY"):
            return cls.OPENAI
        if os.getenv("GROQ_API_KEY"):
            return cls.GROQ
        return cls.OLLAMA


# Default models per provider
DEFAULT_MODELS = {
    ModelProvider.OPENAI: "gpt-4.1-2025-04-14",
    ModelProvider.OLLAMA: "gpt-oss:20b",
    ModelProvider.GROQ: "openai/gpt-oss-120b",
}

MODEL_ENV_VARS = {
    ModelProvider.OPENAI: "OPENAI_MODEL",
    ModelProvider.OLLAMA: "OLLAMA_MODEL",
    ModelProvider.GROQ: "GROQ_MODEL",
}

API_KEY_ENV_VARS = {
    ModelProvider.OPENAI: "OPENAI_API_KEY",
    ModelProvider.GROQ: "GROQ_API_KEY",
}


@dataclass(frozen=True)
class ModelConfig:
    """Configuration for a model."""
    provider: ModelProvider
    model: str

    @property
    def full_name(self) -> str:
        """Get the full model string for pydantic-ai."""
        return f"{self.provider.value}:{self.model}"

    def __str__(self) -> str:
        return f"{self.provider.value}/{self.model}"


def get_model_config(provider: Optional[ModelProvider] = None) -> ModelConfig:
    """Get the model configuration."""
    if provider is None:
        provider = ModelProvider.from_env()

    model = os.getenv(MODEL_ENV_VARS[provider], DEFAULT_MODELS[provider])
    return ModelConfig(provider=provider, model=model)


def ensure_ollama_env():
    """Ensure OLLAMA_BASE_URL is set correctly for pydantic-ai.

    Pydantic-ai requires OLLAMA_BASE_URL with /v1 suffix.
    """
    os.environ["OLLAMA_BASE_URL"] = get_ollama_base_url()


def get_model_name(config: Optional[ModelConfig] = None) -> str:
    """Get the model string for pydantic-ai.

    Uses the environment's config when none is given. For Ollama, ensures
    OLLAMA_BASE_URL is set with /v1 suffix.
    """
    if config is None:
        config = get_model_config()

    if config.provider == ModelProvider.OLLAMA:
        ensure_ollama_env()

    return config.full_name


def get_ollama_base_url() -> str:
    """Get Ollama base URL."""
    base = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    if not base.endswith("/v1"):
        base = base.rstrip("/") + "/v1"
    return base


def get_current_config() -> dict:
    """Get current configuration as a dictionary."""
    provider = ModelProvider.from_env()
    model_config = get_model_config(provider)

    config = {
        "provider": provider.value,
        "model": model_config.model,
        "model_full": model_config.full_name,
    }

    if provider == ModelProvider.OLLAMA:
        config["ollama_url"] = get_ollama_base_url()
    else:
        config["api_key_set"] = bool(os.getenv(API_KEY_ENV_VARS[provider]))

    return config


def print_config():
    """Print current configuration."""
    config = get_current_config()
    print(f"Provider: {config['provider']}")
    print(f"Model: {config['model_full']}")
    if config["provider"] == "ollama":
        print(f"Ollama URL: {config.get('ollama_url')}")
    else:
        print(f"API Key: {'Set' if config.get('api_key_set') else 'NOT SET'}")
