"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from txlens.constants.magics import DISPLAY_PRECISION


class Settings(BaseSettings):
    """txlens configuration from environment variables (``TXLENS_`` prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="TXLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="txlens", description="Application name")
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Parsing
    display_precision: int = Field(
        default=DISPLAY_PRECISION,
        ge=0,
        le=18,
        description="Fractional digits shown in display values",
    )
    parser_cache_max_size: int = Field(
        default=32, ge=1, description="Parsers kept by the context cache"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
