"""Configuration package."""

from finance_tracker.config.settings import (
    CsvFormat,
    LedgerSettings,
    get_settings,
)

__all__ = [
    "CsvFormat",
    "LedgerSettings",
    "get_settings",
]
