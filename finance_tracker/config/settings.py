"""
Configuration Management for Finance Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The core modules take explicit arguments; only the factories
(create_store, configure_logging) and the app read settings.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CsvFormat(str, Enum):
    """
    Data file dialects.

    PLAIN is the historical format: fields joined by commas with no
    quoting, so a comma inside a description corrupts the row.
    QUOTED escapes fields the way the csv module does.
    """
    PLAIN = "plain"
    QUOTED = "quoted"


class LedgerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from FINANCE_TRACKER_* environment variables
    and a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Storage
    data_file: Path = Field(
        default=Path("transactions.csv"),
        description="Path of the CSV data file"
    )
    csv_format: CsvFormat = Field(
        default=CsvFormat.PLAIN,
        description="Data file dialect (plain or quoted)"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum level for local logs"
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of console output"
    )

    # Display
    currency_symbol: str = Field(
        default="$",
        max_length=3,
        description="Symbol shown in front of amounts in the UI"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()
