"""Configuration management using Pydantic Settings."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from initiative_scoring.models.enums import Scenario


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Initiative Prioritization Engine"
    app_version: str = "1.0.0"
    debug: bool = False

    # Scoring
    scoring_scenario: Scenario = Field(
        default=Scenario.A,
        description="Weight scenario: A balanced, B impact-led, C feasibility-led",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
