"""
Data Models Package

This package contains all Pydantic models used in Finance Tracker.
All data flowing through the ledger must conform to these schemas.
"""

from finance_tracker.models.transaction import (
    LedgerSummary,
    LoadReport,
    SkippedLine,
    Transaction,
    TransactionKind,
    ValidationIssue,
)
from finance_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "LedgerSummary",
    "LoadReport",
    "SkippedLine",
    "Transaction",
    "TransactionKind",
    "ValidationIssue",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
