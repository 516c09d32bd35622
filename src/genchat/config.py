"""Configuration management for genchat."""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ApiKeyNotConfiguredError

MODEL = "gemini:gemini-2.0-flash"
API_KEY_ENV = "GOOGLE_API_KEY"
API_KEY_NOT_CONFIGURED_ERROR = f"{API_KEY_ENV} not found in environment variables."


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GENCHAT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # API Configuration
    api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GENCHAT_API_KEY", API_KEY_ENV),
        description="API key for the model provider",
    )
    api_base: Optional[str] = Field(None, description="Optional API base URL")

    # Conversation Configuration
    system_prompt: Optional[str] = Field(None, description="System instruction sent with every turn")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")

    @property
    def model(self) -> str:
        """The fixed provider:model identifier."""
        return MODEL

    def require_api_key(self) -> str:
        if not self.api_key or not self.api_key.strip():
            raise ApiKeyNotConfiguredError(API_KEY_NOT_CONFIGURED_ERROR)
        return self.api_key.strip()


def get_settings() -> Settings:
    """Get application settings.

    pydantic-settings reads the process environment and the ``.env`` file
    in the current directory.
    """
    return Settings()
