"""Configuration management for explaincode."""

import logging
from typing import Any
from urllib.parse import urlsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.codeexplain.xyz/api/v1/explain"


class Settings(BaseSettings):
    """Application settings.

    Read from ``EXPLAINCODE_*`` environment variables or a ``.env`` file.
    Library code never reads this object directly; entry points pass the
    values they need down as arguments.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPLAINCODE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "explaincode"
    debug: bool = False  # Exposes HTML source and original markdown next to the result

    # Explanation API
    api_url: str = DEFAULT_API_URL

    # Timeouts (seconds)
    connect_timeout: float = 10.0
    request_timeout: float = 30.0

    # Presentation
    dark_theme: bool = False

    # Logging
    json_logs: bool = False

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate explanation API URL format."""
        v = v.rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("API URL must start with http:// or https://")
        if not urlsplit(v).hostname:
            raise ValueError("API URL must include a host")
        return v

    @field_validator("connect_timeout", "request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeouts must be positive."""
        if v <= 0:
            raise ValueError("Timeout must be greater than zero")
        return v


def get_config_dict(current: Settings) -> dict[str, Any]:
    """Get the non-secret settings as a plain dict (for debug output)."""
    return {
        "app_name": current.app_name,
        "debug": current.debug,
        "api_url": current.api_url,
        "connect_timeout": current.connect_timeout,
        "request_timeout": current.request_timeout,
        "dark_theme": current.dark_theme,
    }


def validate_critical_settings(current: Settings) -> None:
    """Log warnings for settings that are valid but probably unintended."""
    if current.api_url.startswith("http://"):
        logger.warning(
            f"Explanation API URL {current.api_url} is not using HTTPS. "
            "Selected code will be sent unencrypted."
        )

    if current.connect_timeout > current.request_timeout:
        logger.warning(
            f"connect_timeout ({current.connect_timeout}s) exceeds request_timeout "
            f"({current.request_timeout}s); the request timeout will apply first."
        )

