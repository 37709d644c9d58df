"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Scraper settings loaded from environment variables."""

    sink_base_url: str = "https://nutro.snapdark.com"
    sink_region: str = "BR"
    sink_language: str = ""
    sink_source: str = "mobile"
    sink_timeout_seconds: float | None = None
    page_user_agent: str = "Mozilla/5.0 (Linux; Android 14) Mobile"
    portion_section_keywords: str = "Quantidades,comuns"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_keywords(raw: str | None) -> tuple[str, ...]:
    """Parse the comma-separated portion section keywords."""
    if raw is None:
        return ()
    return tuple(chunk.strip() for chunk in raw.split(",") if chunk.strip())
