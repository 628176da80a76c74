"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
playground runs out of the box; the credential values are the ones the
learning material tells students to send, and can be overridden via
``BEARER_TOKEN`` and ``API_KEY``.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from fastapi import Request


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "API 101 Learning Playground")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comparison targets for the two demo credential checks.  The bearer
    # token gates ``GET /api/users``; the API key gates ``POST /api/users``.
    bearer_token: str = os.getenv("BEARER_TOKEN", "secret-token-123")
    api_key: str = os.getenv("API_KEY", "my-secret-api-key")

    # Delay bounds for ``GET /api/slow`` in milliseconds.
    slow_default_delay_ms: int = int(os.getenv("SLOW_DEFAULT_DELAY_MS", "3000"))
    slow_max_delay_ms: int = int(os.getenv("SLOW_MAX_DELAY_MS", "10000"))

    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings
