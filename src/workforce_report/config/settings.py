"""
Configuration management for Workforce Report.

This module provides environment-based configuration using Pydantic BaseSettings,
so the same code runs unchanged on a laptop and in scheduled report jobs.
Environment variables are loaded with the WFR_ prefix, except LOG_LEVEL which
is shared with the rest of the tooling and read without a prefix.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("WFR_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    For example, WFR_SOURCE_DATA_PATH overrides source_data_path and
    WFR_LOG_TO_FILE=true enables the rotating log file.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    source_data_path: str = Field(
        default="data/source-data.json",
        description="Personnel source document used when no path is given",
    )
    output_format: Literal["table", "csv", "json"] = Field(
        default="table", description="Default rendering of report rows"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names from the environment."""
        if v is None:
            return "INFO"
        return str(v).strip().upper()

    model_config = SettingsConfigDict(
        env_prefix="WFR_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused; tests that change the environment
    call ``get_settings.cache_clear()`` first.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
