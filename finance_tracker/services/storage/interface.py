"""
Abstract Storage Interface

DESIGN DECISION: The store talks to its data file through an abstract
interface. This allows us to:
1. Keep the CSV file as the production backend
2. Use in-memory storage for testing
3. Keep the store and the codec free of file handling

The interface is intentionally tiny: the whole ledger is read as lines
and written back as lines. There is no per-record access.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger storage.

    Any backend (flat file, in-memory, ...) must implement these methods.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable name of the source/sink, used in logs."""
        pass

    @abstractmethod
    def read_lines(self) -> Optional[list[str]]:
        """
        Read the whole ledger.

        Returns:
            The stored lines without line terminators, header included,
            or None if nothing has been stored yet

        Raises:
            StorageReadError: If the source exists but can't be read
        """
        pass

    @abstractmethod
    def write_lines(self, lines: Sequence[str]) -> None:
        """
        Replace the stored ledger with the given lines.

        Args:
            lines: Lines to store, header first, without terminators

        Raises:
            StorageWriteError: If the sink can't be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """The ledger source exists but could not be read."""
    pass


class StorageWriteError(StorageError):
    """The ledger sink could not be written."""
    pass
