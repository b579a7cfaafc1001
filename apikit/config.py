"""Library configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from APIKIT_* environment variables."""

    LOG_LEVEL: str = "INFO"
    # Log message plus root cause for AppError responses.
    LOG_ERROR_CAUSES: bool = True

    model_config = SettingsConfigDict(
        env_prefix="APIKIT_",
        env_file=".env",
        extra="ignore",
        case_sensitive=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
