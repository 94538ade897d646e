"""Configuration management for odds-distribution.

Settings are loaded from environment variables (prefix ODDS_DIST_) and an
optional .env file using pydantic-settings. Invalid values fail fast with a
ValidationError when settings are first read.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Optional settings (have defaults):
    - ODDS_DIST_LOG_MODE: "development" (console) or "production" (JSON)
    - ODDS_DIST_LOG_LEVEL: stdlib level name for the root logger
    - ODDS_DIST_DISPLAY_DECIMALS: Percentage decimals in CLI tables
    - ODDS_DIST_DEFAULT_EXAMPLE: Scenario run by `odds-dist example` with no argument
    """

    log_mode: Literal["development", "production"] = Field(default="development")
    log_level: str = Field(default="WARNING")
    display_decimals: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimals shown for percentages (presentation only)",
    )
    default_example: str = Field(default="brady-basic")

    model_config = SettingsConfigDict(
        env_prefix="ODDS_DIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings instance with validated configuration

    Raises:
        ValidationError: If an environment value is invalid
    """
    return Settings()
