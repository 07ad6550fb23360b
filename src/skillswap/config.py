"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with SKILLSWAP_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="SKILLSWAP_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Server ---
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000

    # --- Demo data ---
    seed_demo: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
