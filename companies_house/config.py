"""
Runtime settings for the Companies House client.

Loaded from ``COMPANIES_HOUSE_*`` environment variables via pydantic-settings:
    COMPANIES_HOUSE_API_KEY     Registry API key
    COMPANIES_HOUSE_BASE_URL    Registry base URL
    COMPANIES_HOUSE_TIMEOUT     Upstream timeout in seconds
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.company-information.service.gov.uk"
DEFAULT_TIMEOUT_SECONDS = 10.0


class Settings(BaseSettings):
    """Connection settings for the upstream registry."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    model_config = SettingsConfigDict(
        env_prefix="COMPANIES_HOUSE_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT_SECONDS", "Settings"]
