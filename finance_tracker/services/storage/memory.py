"""In-memory storage backend, used by tests and throwaway sessions."""

from typing import Optional, Sequence

from finance_tracker.services.storage.interface import (
    LedgerStorageInterface,
    StorageReadError,
    StorageWriteError,
)


class InMemoryStorage(LedgerStorageInterface):
    """
    Keeps the stored lines in a list.

    fail_reads / fail_writes make the backend raise, so callers can
    exercise their error paths without touching the filesystem.
    """

    def __init__(
        self,
        lines: Optional[Sequence[str]] = None,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ):
        self._lines = list(lines) if lines is not None else None
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.write_count = 0

    @property
    def location(self) -> str:
        return "<memory>"

    @property
    def lines(self) -> Optional[list[str]]:
        return list(self._lines) if self._lines is not None else None

    def read_lines(self) -> Optional[list[str]]:
        if self.fail_reads:
            raise StorageReadError("In-memory storage is configured to fail reads")
        return self.lines

    def write_lines(self, lines: Sequence[str]) -> None:
        if self.fail_writes:
            raise StorageWriteError("In-memory storage is configured to fail writes")
        self._lines = list(lines)
        self.write_count += 1
