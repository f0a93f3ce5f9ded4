"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    scoring_model: str = "nova-v2"
    scoring_mode: str = "portion-aware"
    scoring_model_files: str | None = None
    scoring_model_base: str = "nova-v2"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FOOD_SUITABILITY_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_model_files(raw: str | None) -> list[str]:
    """Parse a comma-separated list of model config file paths."""
    if raw is None:
        return []
    paths: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value and value not in paths:
            paths.append(value)
    return paths
