"""
Configuration management for the mock server.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_FIXTURE_PATH = Path(__file__).resolve().parent / "mock-data.json"


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_prefix="MOCK_", case_sensitive=False)

    fixture_path: Path = DEFAULT_FIXTURE_PATH
    host: str = "0.0.0.0"
    port: int = 8000
    cors_allow_origins: list[str] = ["*"]

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()  # type: ignore[call-arg]
