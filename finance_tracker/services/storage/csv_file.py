"""
Flat-file storage backend.

Reads and writes the ledger as a UTF-8 text file with "\\n" line endings.
A save writes a temporary file next to the target and swaps it in, so an
interrupted or failed save leaves the previous file intact.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence, Union

import structlog

from finance_tracker.services.storage.interface import (
    LedgerStorageInterface,
    StorageReadError,
    StorageWriteError,
)


logger = structlog.get_logger(__name__)


class CsvFileStorage(LedgerStorageInterface):
    """Ledger stored in a single CSV file on disk."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def read_lines(self) -> Optional[list[str]]:
        try:
            with self._path.open("r", encoding="utf-8", newline="") as f:
                return [line.rstrip("\r\n") for line in f]
        except FileNotFoundError:
            logger.info("data_file_missing", path=self.location)
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(
                f"Error loading transactions from {self.location}: {e}"
            ) from e

    def write_lines(self, lines: Sequence[str]) -> None:
        directory = self._path.parent
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=directory,
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                for line in lines:
                    f.write(line)
                    f.write("\n")
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            raise StorageWriteError(
                f"Error saving transactions to {self.location}: {e}"
            ) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("temp_file_cleanup_failed", path=tmp_name)

        logger.debug("data_file_written", path=self.location, lines=len(lines))
