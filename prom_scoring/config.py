"""Scoring engine configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime settings for the scoring engine.

    Only ambient behaviour (logging) is configurable. Question keys, scale
    bounds and rounding precision are clinical constants and live in
    prom_scoring.scoring.instruments.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "PROM Scoring Engine"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Emit raw/max values per subscale at DEBUG
    LOG_SCORING_DETAILS: bool = False

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Patient answers must not reach production logs."""
        if self.APP_ENV == "production" and self.LOG_SCORING_DETAILS:
            raise ValueError("LOG_SCORING_DETAILS must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
