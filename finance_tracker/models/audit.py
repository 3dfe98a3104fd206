"""
Audit Models for Finance Tracker

Every significant ledger action is recorded as an audit event:
adding a transaction, loading the data file (with the number of
malformed records skipped) and saving it.

DESIGN DECISION: Audit trails are append-only. Events are never edited or removed.
"""

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _short_location(location: str) -> str:
    """File name of a storage location; the full location goes in details."""
    return Path(location).name or location


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Store mutations
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_REJECTED = "transaction_rejected"

    # Persistence
    LEDGER_LOADED = "ledger_loaded"
    LEDGER_LOAD_FAILED = "ledger_load_failed"
    LEDGER_SAVED = "ledger_saved"
    LEDGER_SAVE_FAILED = "ledger_save_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Event details
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_message: Optional[str] = None

    # User action tracking
    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.ledger_loaded("transactions.csv", 12, 0, True)
        event = AuditEventBuilder.ledger_saved("transactions.csv", 12)
    """

    @staticmethod
    def transaction_added(
        transaction_date: str,
        description: str,
        amount: str,
        kind: str,
        category: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            description=f"Transaction added: {description[:80]} ({kind} {amount[:40]})",
            details={
                "date": transaction_date,
                "description": description,
                "amount": amount,
                "kind": kind,
                "category": category,
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_rejected(issues: list[dict]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_REJECTED,
            severity=AuditSeverity.WARNING,
            description=f"Transaction rejected with {len(issues)} issues",
            details={
                "issues": issues,
            },
            is_user_action=True,
        )

    @staticmethod
    def ledger_loaded(
        source: str,
        loaded: int,
        skipped: int,
        source_found: bool,
    ) -> AuditEvent:
        if source_found:
            description = f"Loaded {loaded} transactions from {_short_location(source)}"
        else:
            description = f"No data file found at {_short_location(source)}. Starting with an empty ledger"
        return AuditEvent(
            event_type=AuditEventType.LEDGER_LOADED,
            description=description,
            details={
                "source": source,
                "loaded": loaded,
                "skipped": skipped,
                "source_found": source_found,
            },
        )

    @staticmethod
    def ledger_load_failed(source: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            description=f"Error loading transactions from {_short_location(source)}",
            error_message=error_message,
            details={
                "source": source,
            },
        )

    @staticmethod
    def ledger_saved(sink: str, count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_SAVED,
            description=f"Saved {count} transactions to {_short_location(sink)}",
            details={
                "sink": sink,
                "count": count,
            },
            is_user_action=True,
        )

    @staticmethod
    def ledger_save_failed(sink: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            description=f"Error saving transactions to {_short_location(sink)}",
            error_message=error_message,
            details={
                "sink": sink,
            },
        )
