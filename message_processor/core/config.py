"""Application configuration powered by pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized strongly-typed configuration loaded from `.env`."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "Message Processor"
    PROJECT_VERSION: str = "1.0.0"

    HOST: str = Field("0.0.0.0", description="Interface the HTTP server binds to")
    PORT: int = Field(8081, description="TCP port the HTTP server binds to")

    # Brand-specific text placed in front of every decorated message
    MESSAGE_MARKER: str = "[Processed by Python]"

    LOG_LEVEL: str = "INFO"

    # Mount /docs, /redoc and /openapi.json; off so only /process is routable
    ENABLE_DOCS: bool = False


@lru_cache
def get_settings() -> Settings:
    """Cache and return a singleton Settings instance to avoid re-parsing env."""
    return Settings()


settings = get_settings()
