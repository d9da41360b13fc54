"""Application configuration using Pydantic Settings.

Loads settings from environment variables and .env file.
All settings have sensible defaults for local development.
"""

from __future__ import annotations

import json
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Valid Python logging levels
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Service-wide configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Server ---
    service_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3001

    # Public routes are served at the root and again under this prefix
    api_prefix: str = "/api"

    # --- Logging ---
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level to uppercase.

        Falls back to INFO if an invalid level is provided.
        """
        normalized = v.upper().strip()
        if normalized not in VALID_LOG_LEVELS:
            # Log a warning (to stderr since logging may not be configured yet)
            import sys

            print(
                f"WARNING: Invalid LOG_LEVEL '{v}'. "
                f"Valid levels are: {', '.join(sorted(VALID_LOG_LEVELS))}. "
                "Falling back to INFO.",
                file=sys.stderr,
            )
            return "INFO"
        return normalized

    def get_log_level_int(self) -> int:
        """Return the integer value of the configured log level."""
        return getattr(logging, self.log_level, logging.INFO)

    # --- Outbound fetch budgets (seconds) ---
    article_fetch_timeout: float = 10.0
    relay_fetch_timeout: float = 15.0
    fetch_max_redirects: int = 10

    # --- CORS ---
    cors_origins: str = "*"

    def get_cors_origins(self) -> list[str]:
        """Parse cors_origins as JSON list or comma-separated string."""
        raw = self.cors_origins.strip()
        if raw.startswith("["):
            return json.loads(raw)
        return [o.strip() for o in raw.split(",") if o.strip()]


settings = Settings()
