"""
Storage Services Package

Provides the abstract storage interface and its implementations.
The flat CSV file is the production backend; the in-memory backend
exists for tests.
"""

from finance_tracker.services.storage.interface import (
    LedgerStorageInterface,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from finance_tracker.services.storage.csv_file import CsvFileStorage
from finance_tracker.services.storage.memory import InMemoryStorage

__all__ = [
    # Interfaces
    "LedgerStorageInterface",
    # Exceptions
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Implementations
    "CsvFileStorage",
    "InMemoryStorage",
]
