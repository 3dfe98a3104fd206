"""Services package."""

from finance_tracker.services.storage import (
    CsvFileStorage,
    InMemoryStorage,
    LedgerStorageInterface,
    StorageError,
    StorageReadError,
    StorageWriteError,
)

__all__ = [
    # Storage services
    "CsvFileStorage",
    "InMemoryStorage",
    "LedgerStorageInterface",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
]
