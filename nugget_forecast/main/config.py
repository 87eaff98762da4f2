"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nugget_forecast.shared import EnumEnvironment, EnumLogLevel


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class PredictionSettings(BaseSettings):
    """Tunables of the prediction engine."""

    history_limit: int = Field(
        default=10, ge=1, description="Most recent same-kind records considered"
    )
    recent_pattern_limit: int = Field(
        default=5, ge=0, description="Records echoed back in the recent pattern"
    )
    max_valid_gap_hours: float = Field(
        default=12.0,
        gt=0,
        description="Gaps at or above this many hours are left out of averages",
    )
    recovery_interval_factor: float = Field(
        default=0.6,
        gt=0,
        le=1,
        description="Fraction of the interval suggested once a prediction is overdue",
    )
    feeding_preference_weight: float = Field(
        default=0.4, ge=0, le=1, description="Default custom weight for feeding"
    )
    pumping_preference_weight: float = Field(
        default=0.4, ge=0, le=1, description="Default custom weight for pumping"
    )
    sleep_preference_weight: float = Field(
        default=0.4, ge=0, le=1, description="Default custom weight for sleep"
    )

    model_config = SettingsConfigDict(
        env_prefix="PREDICTION_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    prediction: PredictionSettings = Field(default_factory=PredictionSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
