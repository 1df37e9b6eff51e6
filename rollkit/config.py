"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ROLLKIT_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="ROLLKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cap on explosion bonus rolls per dice group
    max_explosions: int = Field(default=100, ge=0)

    # Fixed seed for reproducible rolls (None = system entropy)
    seed: int | None = None

    # Debug
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
