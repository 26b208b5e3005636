from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (parent of backend/) for .env loading when running from backend/
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Value shipped in sample configs; treated the same as a missing key.
PLACEHOLDER_API_KEY = "your-groq-api-key"

DEFAULT_GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_GROQ_MODEL = "meta-llama/llama-4-scout-17b-16e-instruct"


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.
    """

    # Core app settings
    app_name: str = Field(default="ai_testcase_generator")
    environment: str = Field(default="development")  # development | staging | production
    debug: bool = Field(default=False)

    # HTTP server
    api_prefix: str = Field(default="/api")
    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API. Defaults to any origin.",
    )

    # Observability
    log_level: str = Field(default="INFO")

    # Groq chat-completions endpoint
    groq_api_key: Optional[str] = Field(
        default=None,
        description="Groq API key. Required for generation. Set TESTGEN_GROQ_API_KEY in .env.",
    )
    groq_api_url: str = Field(
        default=DEFAULT_GROQ_API_URL,
        description="Full URL of the chat-completions endpoint.",
    )
    groq_model: str = Field(
        default=DEFAULT_GROQ_MODEL,
        description="Model identifier sent with every completion request.",
    )
    groq_timeout_seconds: int = Field(default=120)

    model_config = SettingsConfigDict(
        env_prefix="TESTGEN_",
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def groq_api_key_configured(self) -> bool:
        """True when a real (non-empty, non-placeholder) key is set."""
        return bool(self.groq_api_key) and self.groq_api_key != PLACEHOLDER_API_KEY


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached settings instance for use as a dependency.
    """
    return Settings()
