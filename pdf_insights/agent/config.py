"""Agent configuration with environment variable loading.

Pydantic-based configuration for the document analysis agent.
Supports OpenAI (and OpenAI-compatible APIs via custom base URL) and Google Gemini.
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "google": "gemini-2.0-flash",
}


def _api_key_from_env() -> str:
    return (
        os.getenv("LLM_API_KEY")
        or os.getenv("OPENAI_API_KEY")
        or os.getenv("GOOGLE_API_KEY")
        or ""
    )


class AgentConfig(BaseModel):
    """Configuration for the document analysis agent.

    Attributes:
        provider: Model provider, "openai" or "google".
        api_key: API key for model access.
        base_url: API base URL (None for the provider default).
        model_name: Model identifier; defaults per provider when unset.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
    """

    provider: Literal["openai", "google"] = Field(
        default_factory=lambda: os.getenv("LLM_PROVIDER", "openai").lower(),
        description="Model provider",
    )
    api_key: str = Field(
        default_factory=_api_key_from_env,
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for provider default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", ""),
        description="Model to use",
    )
    temperature: float = Field(
        default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", "0.3")),
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", "2048")),
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set LLM_API_KEY, OPENAI_API_KEY or GOOGLE_API_KEY in .env"
            )
        return v.strip()

    @model_validator(mode="after")
    def default_model_for_provider(self) -> "AgentConfig":
        if not self.model_name.strip():
            self.model_name = DEFAULT_MODELS[self.provider]
        return self


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return AgentConfig()
