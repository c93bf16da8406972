"""Application settings.

All configuration is sourced from environment variables (and optionally `.env`).
"""

from __future__ import annotations

import secrets
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed environment-backed settings for SkinCare AI."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Anthropic. A missing key only surfaces when an analysis is requested.
    anthropic_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ANTHROPIC_API_KEY", "API_KEY"),
    )
    anthropic_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ANTHROPIC_ENDPOINT", "ENDPOINT"),
    )
    anthropic_model: str = Field(
        default="claude-sonnet-4-5",
        validation_alias=AliasChoices("ANTHROPIC_MODEL", "MODEL"),
    )
    max_tokens: int = Field(default=2048, alias="SKINCARE_MAX_TOKENS")

    # Provider limit for a single image payload.
    max_image_bytes: int = Field(default=5 * 1024 * 1024, alias="SKINCARE_MAX_IMAGE_BYTES")

    # Web surface
    secret_key: str = Field(
        default_factory=lambda: secrets.token_hex(32),
        alias="SKINCARE_SECRET_KEY",
    )
    cors_origins: str = Field(
        default="http://localhost:5000,http://127.0.0.1:5000",
        alias="SKINCARE_CORS_ORIGINS",
    )
    rate_limit: str = Field(default="60 per minute", alias="SKINCARE_RATE_LIMIT")
    # Idle sessions are dropped along with their image after this many seconds.
    session_idle_seconds: float = Field(default=30 * 60, alias="SKINCARE_SESSION_IDLE_SECONDS")

    # Logging
    log_level: str = Field(default="INFO", alias="SKINCARE_LOG_LEVEL")
    log_file: Path | None = Field(default=None, alias="SKINCARE_LOG_FILE")
    log_stdout: bool = Field(default=False, alias="SKINCARE_LOG_STDOUT")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
