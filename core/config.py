"""
Application configuration management.

Uses pydantic-settings for type-safe environment variable parsing.
Service credentials are loaded once from the environment (or a .env
file) and handed to the service clients at construction time.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    SDK settings with validation and type coercion.

    Values are loaded from environment variables or .env file.
    Credentials default to None so that importing the SDK never fails;
    clients complain when they are constructed without them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Retrieve and Rank
    retrieve_and_rank_username: Optional[str] = None
    retrieve_and_rank_password: Optional[str] = None
    retrieve_and_rank_url: str = "https://gateway.watsonplatform.net/retrieve-and-rank/api"

    # HTTP
    request_timeout_seconds: float = 30.0

    # Mock configuration
    mock_provisioning_seconds: int = 2

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def has_retrieve_and_rank_credentials(self) -> bool:
        """Check if both Retrieve and Rank credentials are configured."""
        return bool(self.retrieve_and_rank_username and self.retrieve_and_rank_password)


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings singleton.

    The @lru_cache ensures we only parse environment once.
    """
    return Settings()


# Convenience export for direct import
settings = get_settings()
