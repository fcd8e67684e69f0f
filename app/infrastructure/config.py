"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    service_name: str = "catalog-api"
    api_version: str = "1.0.0"
    api_prefix: str = "/api/internal"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Storage
    seed_data: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
