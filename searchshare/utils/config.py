"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.

Every detector threshold that is a judgement call rather than part of the
published methodology lives here, so it can be tuned per deployment with
SEARCHSHARE_* environment variables.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCHSHARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Application Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Quick wins
    QUICK_WIN_MIN_VOLUME: int = 100
    QUICK_WIN_MIN_POSITION: int = 4
    QUICK_WIN_MAX_POSITION: int = 10
    QUICK_WIN_TARGET_POSITION: int = 3

    # Hidden gems
    HIDDEN_GEM_VOLUME_PERCENTILE: float = 75.0
    HIDDEN_GEM_MIN_VOLUME: int = 200
    HIDDEN_GEM_INVISIBLE_POSITION: int = 20
    HIDDEN_GEM_BASELINE_POSITION: int = 5
    HIDDEN_GEM_LIMIT: int = 20

    # Cannibalization
    CANNIBALIZATION_SIMILARITY_THRESHOLD: float = 0.8
    CANNIBALIZATION_MIN_TOKEN_LENGTH: int = 3
    # Shorter token must cover this share of the longer one to count as the same root
    CANNIBALIZATION_MIN_ROOT_COVERAGE: float = 0.75

    # Content gaps
    CONTENT_GAP_MAX_COVERAGE: float = 0.2
    CONTENT_GAP_MIN_VOLUME: int = 1000
    CONTENT_GAP_VISIBLE_POSITION: int = 20
    CONTENT_GAP_CAPTURE_RATE: float = 0.05

    # Saved analyses
    MAX_SAVED_ANALYSES: int = 10


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()
