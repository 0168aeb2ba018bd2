"""
Application settings for API Composer.

Settings are read once from the environment (prefix ``API_COMPOSER_``) or a
``.env`` file and are read-only afterwards.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Origin of the API under test in the original tool
DEFAULT_BASE_URL = "http://localhost:8080/api"


class Settings(BaseSettings):
    """Process-wide configuration loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="API_COMPOSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    base_url: str = Field(default=DEFAULT_BASE_URL)
    auth_supported: bool = Field(default=True)
    log_level: str = Field(default="INFO")
    cors_origins: str = Field(default="*")

    def parsed_cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide settings instance.

    The instance is created on first use and cached, so every caller sees
    the same base URL for the lifetime of the process.
    """
    return Settings()
