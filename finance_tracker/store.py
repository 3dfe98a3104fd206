"""
Transaction Store for Finance Tracker

This module owns the ledger: the ordered, append-only list of
transactions, plus loading it from and saving it to a storage backend.

DESIGN DECISION: The store enforces the boundaries:
- Nothing enters the ledger without passing input validation
- Every public operation is all-or-nothing (a failed add, load or save
  leaves the in-memory ledger exactly as it was)
- Every step is audited

Presentation code calls add/list/load/save here and runs the pure
functions in finance_tracker.queries over list().
"""

from typing import Iterator, Optional

from finance_tracker.audit import AuditLogger
from finance_tracker.codec.csv_codec import decode_all, encode_all
from finance_tracker.config import CsvFormat, LedgerSettings, get_settings
from finance_tracker.models.transaction import LoadReport, Transaction
from finance_tracker.services.storage import (
    CsvFileStorage,
    LedgerStorageInterface,
    StorageError,
)
from finance_tracker.validation import (
    TransactionValidator,
    ValidationError,
)
from finance_tracker.validation.validator import (
    AmountInput,
    DateInput,
    KindInput,
)


class TransactionStore:
    """
    In-memory ledger backed by a storage backend.

    Insertion order is preserved and is the default display and
    query order. There is no edit or delete; save() rewrites the
    whole backend.
    """

    def __init__(
        self,
        storage: LedgerStorageInterface,
        csv_format: CsvFormat = CsvFormat.PLAIN,
        validator: Optional[TransactionValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._csv_format = csv_format
        self._validator = validator or TransactionValidator()
        self._audit_logger = audit_logger
        self._transactions: list[Transaction] = []

    @property
    def storage(self) -> LedgerStorageInterface:
        return self._storage

    @property
    def audit_logger(self) -> Optional[AuditLogger]:
        return self._audit_logger

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.list())

    def add(
        self,
        description: object,
        amount: AmountInput,
        kind: KindInput,
        category: object,
        date: DateInput,
    ) -> Transaction:
        """
        Validate the input and append a new transaction.

        Description and category are stored trimmed.

        Returns:
            The transaction that was appended

        Raises:
            ValidationError: If description or category is empty, or the
                amount, type or date can't be parsed. The ledger is unchanged.
        """
        transaction, issues = self._validator.validate(
            description=description,
            amount=amount,
            kind=kind,
            category=category,
            date=date,
        )

        if transaction is None:
            if self._audit_logger:
                self._audit_logger.log_transaction_rejected(issues)
            raise ValidationError(issues)

        self._transactions.append(transaction)

        if self._audit_logger:
            self._audit_logger.log_transaction_added(transaction)

        return transaction

    def list(self) -> list[Transaction]:
        """Snapshot of the ledger in insertion order."""
        return list(self._transactions)

    def load(self, storage: Optional[LedgerStorageInterface] = None) -> LoadReport:
        """
        Replace the ledger with the contents of a storage backend.

        Malformed lines are skipped and reported, never fatal.
        A backend with nothing stored yet gives an empty ledger.

        Args:
            storage: Backend to read; defaults to the store's own

        Raises:
            StorageReadError: If the source exists but can't be read.
                The ledger is unchanged.
        """
        source = storage or self._storage

        try:
            lines = source.read_lines()
        except StorageError as e:
            if self._audit_logger:
                self._audit_logger.log_load_failed(source.location, str(e))
            raise

        if lines is None:
            self._transactions = []
            report = LoadReport(source_found=False)
        else:
            result = decode_all(lines, self._csv_format)
            self._transactions = result.transactions
            report = LoadReport(
                source_found=True,
                loaded=len(result.transactions),
                skipped=result.skipped,
            )

        if self._audit_logger:
            self._audit_logger.log_ledger_loaded(
                source=source.location,
                loaded=report.loaded,
                skipped=report.skipped_count,
                source_found=report.source_found,
            )

        return report

    def save(self, storage: Optional[LedgerStorageInterface] = None) -> None:
        """
        Write the whole ledger to a storage backend, replacing its content.

        Args:
            storage: Backend to write; defaults to the store's own

        Raises:
            StorageWriteError: If the sink can't be written.
                The ledger is unchanged.
        """
        sink = storage or self._storage
        lines = encode_all(self._transactions, self._csv_format)

        try:
            sink.write_lines(lines)
        except StorageError as e:
            if self._audit_logger:
                self._audit_logger.log_save_failed(sink.location, str(e))
            raise

        if self._audit_logger:
            self._audit_logger.log_ledger_saved(sink.location, len(self._transactions))


def create_store(
    settings: Optional[LedgerSettings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> TransactionStore:
    """
    Factory function to create a store from settings.

    The store is backed by the configured CSV data file and is
    returned empty; call load() to read the file.
    """
    settings = settings or get_settings()

    return TransactionStore(
        storage=CsvFileStorage(settings.data_file),
        csv_format=settings.csv_format,
        audit_logger=audit_logger or AuditLogger(),
    )
