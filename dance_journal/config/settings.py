"""
Application Configuration

This module provides type-safe configuration loading using Pydantic settings.
Environment variables are loaded from .env file and validated.

Usage:
    from dance_journal.config import settings

    # Access settings
    model = settings.TEXT_MODEL
    studio = settings.DEFAULT_STUDIO
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Dance Journal"
    DEBUG: bool = False

    # LLM provider keys (any one enables the coach)
    OPENAI_API_KEY: str = ""
    ANTHROPIC_API_KEY: str = ""
    GEMINI_API_KEY: str = ""

    # Coach models (LiteLLM format: provider/model-name)
    TEXT_MODEL: str = "gemini/gemini-2.5-flash"
    SUMMARY_MODEL: str = "gemini/gemini-2.5-flash"

    COACH_TEMPERATURE: float = 0.7
    COACH_MAX_TOKENS: int = 256
    COACH_TIMEOUT_SECONDS: float = 30.0

    # Record creation defaults
    DEFAULT_STYLE: str = "Freestyle"
    DEFAULT_STUDIO: str = "Unknown Studio"
    DEFAULT_INSTRUCTOR: str = "Self"
    DEFAULT_DURATION_MINUTES: int = 60

    # Placeholder for "top" stats when nothing was logged
    EMPTY_CATEGORY_LABEL: str = "-"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()


@lru_cache()
def load_yaml_config() -> dict[str, Any]:
    """Load application configuration from config/default.yaml."""
    config_path = Path(__file__).parent / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


yaml_config: dict[str, Any] = load_yaml_config()
