"""
Audit Logger

DESIGN DECISION: Every significant ledger action is logged.
This provides:
1. Traceability of what was added, loaded and saved
2. Debugging capability when a data file has bad lines
3. A history the UI can show for the current session

The audit logger:
- Is synchronous, like the rest of the ledger
- Never raises (a logging failure must not break a store operation)
- Keeps an append-only in-memory trail of the session's events
"""

import logging
import sys
from typing import Any, Callable

import structlog

from finance_tracker.codec.csv_codec import format_amount
from finance_tracker.models.audit import AuditEvent, AuditEventBuilder
from finance_tracker.models.transaction import (
    Transaction,
    ValidationIssue,
)


_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog on top of the standard library logger.

    Call once at process start (the app does this from settings).
    """
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger("finance_tracker").setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=_SHARED_PROCESSORS + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog for local logging
structlog.configure(
    processors=_SHARED_PROCESSORS + [structlog.processors.JSONRenderer()],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs every event to the structured local log and appends it
    to the session trail (events).
    """

    def __init__(self, keep_events: bool = True):
        """
        Initialize audit logger.

        Args:
            keep_events: Keep events in memory for later display.
                         If False, events are only logged.
        """
        self._keep_events = keep_events
        self._events: list[AuditEvent] = []
        self._logger = structlog.get_logger("finance_tracker.audit")

    @property
    def events(self) -> list[AuditEvent]:
        """Events logged so far, oldest first."""
        return list(self._events)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns True if the event was logged.
        """
        try:
            log_dict = event.to_log_dict()

            if event.severity.value == "error":
                self._logger.error("audit_event", **log_dict)
            elif event.severity.value == "warning":
                self._logger.warning("audit_event", **log_dict)
            elif event.severity.value == "debug":
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception as e:
            # Log failure but don't raise
            logging.getLogger("finance_tracker.audit").error(
                "audit_log_failed: %s (event_id=%s)", e, event.event_id
            )
            return False

        if self._keep_events:
            self._events.append(event)
        return True

    def _build_and_log(self, build: Callable[..., AuditEvent], **kwargs: Any) -> bool:
        """
        Build an event with one of the AuditEventBuilder constructors and log it.

        A failure while building is logged like a failure while logging.
        """
        try:
            event = build(**kwargs)
        except Exception as e:
            logging.getLogger("finance_tracker.audit").error(
                "audit_event_build_failed: %s (builder=%s)", e, build.__name__
            )
            return False
        return self.log(event)

    def log_transaction_added(self, transaction: Transaction) -> None:
        """Log a successful add."""
        self._build_and_log(
            AuditEventBuilder.transaction_added,
            transaction_date=transaction.date.isoformat(),
            description=transaction.description,
            amount=format_amount(transaction.amount),
            kind=transaction.kind.value,
            category=transaction.category,
        )

    def log_transaction_rejected(self, issues: list[ValidationIssue]) -> None:
        """Log input that failed validation."""
        self._build_and_log(
            AuditEventBuilder.transaction_rejected,
            issues=[issue.model_dump() for issue in issues],
        )

    def log_ledger_loaded(
        self,
        source: str,
        loaded: int,
        skipped: int,
        source_found: bool,
    ) -> None:
        """Log a completed load."""
        self._build_and_log(
            AuditEventBuilder.ledger_loaded,
            source=source,
            loaded=loaded,
            skipped=skipped,
            source_found=source_found,
        )

    def log_load_failed(self, source: str, error_message: str) -> None:
        """Log a load that could not read its source."""
        self._build_and_log(
            AuditEventBuilder.ledger_load_failed,
            source=source,
            error_message=error_message,
        )

    def log_ledger_saved(self, sink: str, count: int) -> None:
        """Log a completed save."""
        self._build_and_log(AuditEventBuilder.ledger_saved, sink=sink, count=count)

    def log_save_failed(self, sink: str, error_message: str) -> None:
        """Log a save that could not write its sink."""
        self._build_and_log(
            AuditEventBuilder.ledger_save_failed,
            sink=sink,
            error_message=error_message,
        )
