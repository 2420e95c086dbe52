"""Generation endpoint configuration with environment variable loading.

Pydantic-based configuration for the Gemini ``generateContent`` client.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-2.0-flash"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


def _env_timeout() -> str | None:
    value = os.getenv("GEMINI_TIMEOUT", "").strip()
    return value or None


class GenerationConfig(BaseModel):
    """Configuration for the generation client.

    Attributes:
        api_key: API key sent with every request.
        base_url: Base URL of the models collection.
        model_name: Model identifier to call.
        enable_search: Whether to ask the service for search-augmented answers.
        request_timeout: Seconds to wait for a reply (None waits forever).
    """

    # Environment values come from default factories and must still be validated
    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", ""),
        description="API key for the Gemini API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="Base URL of the models collection",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    enable_search: bool = Field(
        default_factory=lambda: _env_flag("GEMINI_ENABLE_SEARCH", True),
        description="Attach the Google Search tool to requests",
    )
    request_timeout: float | None = Field(
        default_factory=_env_timeout,
        gt=0,
        description="Request timeout in seconds (unset means no timeout)",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set GEMINI_API_KEY or GOOGLE_API_KEY in .env"
            )
        return v.strip()

    @property
    def endpoint_url(self) -> str:
        """Full URL of the generateContent method for the configured model."""
        return f"{self.base_url.rstrip('/')}/{self.model_name}:generateContent"


def get_generation_config() -> GenerationConfig:
    """Create generation configuration from environment.

    Returns:
        Configured GenerationConfig instance.

    Raises:
        ValidationError: If no API key is set or GEMINI_TIMEOUT is not a
            positive number.
    """
    return GenerationConfig()
