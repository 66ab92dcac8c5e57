"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    tagger_backend: str = "openai"
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str = "low"
    openai_store: bool = False
    classifier_url: str | None = None
    classifier_api_key: str | None = None
    static_tags: str | None = None
    recognition_timeout_seconds: float = 15.0
    catalog_path: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_tag_list(raw: str | None) -> frozenset[str]:
    """Parse a comma-separated tag list from env."""
    if raw is None:
        return frozenset()
    tags: set[str] = set()
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value:
            tags.add(value)
    return frozenset(tags)
