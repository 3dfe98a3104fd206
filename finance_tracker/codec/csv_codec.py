"""
CSV Codec for the ledger data file

Pure functions that turn transactions into data file lines and back.

File layout:
    date,description,amount,type,category
    2024-01-15,Paycheck,2500.0,income,Salary
    2024-01-16,Groceries,54.32,expense,Food

DESIGN DECISION: The default (plain) format does no quoting or escaping.
It stays byte-compatible with existing data files, so a comma inside a
description or category corrupts that row. The quoted format is opt-in.

Decoding never fails as a whole. A bad line raises DecodeSkip internally,
decode_all() records it and moves on to the next line.
"""

import csv
import io
import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence

import structlog

from finance_tracker.config.settings import CsvFormat
from finance_tracker.models.transaction import (
    SkippedLine,
    Transaction,
    TransactionKind,
)


logger = structlog.get_logger(__name__)

HEADER = "date,description,amount,type,category"
FIELD_COUNT = 5

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class DecodeSkip(Exception):
    """A stored line could not be turned into a transaction."""

    def __init__(self, reason: str, line: str, quiet: bool = False):
        super().__init__(reason)
        self.reason = reason
        self.line = line
        # quiet skips are dropped without a warning
        self.quiet = quiet


@dataclass
class DecodeResult:
    """Transactions decoded from a file, in file order, plus what was dropped."""

    transactions: list[Transaction] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)


# =============================================================================
# FIELD PARSING
# =============================================================================

def parse_date(text: str) -> date:
    """
    Parse a strict zero-padded YYYY-MM-DD date.

    Raises ValueError for any other shape (surrounding whitespace
    included) or for an impossible date such as 2024-02-30.
    """
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {text!r}")
    year, month, day = (int(part) for part in text.split("-"))
    return date(year, month, day)


def parse_amount(text: str) -> Decimal:
    """
    Parse a finite decimal amount.

    Negative and zero amounts are allowed. NaN and infinities are not.
    """
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise ValueError(f"Expected a number, got {text!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Expected a finite number, got {text!r}")
    return amount


def format_amount(amount: Decimal) -> str:
    """
    Storage representation of an amount.

    Fixed-point, always with a fractional part: 2500 -> "2500.0",
    54.32 -> "54.32". Display rounding belongs to the presentation layer.
    """
    text = format(amount, "f")
    if "." not in text:
        text += ".0"
    return text


# =============================================================================
# SINGLE LINE
# =============================================================================

def _fields_for(transaction: Transaction) -> list[str]:
    return [
        transaction.date.isoformat(),
        transaction.description,
        format_amount(transaction.amount),
        transaction.kind.value,
        transaction.category,
    ]


def _split_plain(line: str) -> list[str]:
    fields = line.split(",")
    # Trailing empty fields are not counted: "a,b,c,d," has 4 fields
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def _split_quoted(line: str) -> list[str]:
    try:
        rows = list(csv.reader([line], strict=True))
    except csv.Error as e:
        raise DecodeSkip(f"unparseable quoting: {e}", line) from None
    return rows[0] if rows else []


def encode_line(
    transaction: Transaction,
    csv_format: CsvFormat = CsvFormat.PLAIN,
) -> str:
    """Encode one transaction as a data file line (no line terminator)."""
    fields = _fields_for(transaction)
    if csv_format == CsvFormat.QUOTED:
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator="").writerow(fields)
        return buffer.getvalue()
    return ",".join(fields)


def decode_line(
    line: str,
    csv_format: CsvFormat = CsvFormat.PLAIN,
) -> Transaction:
    """
    Decode one data file line.

    Raises:
        DecodeSkip: if the line does not hold exactly five fields,
            or the date, amount or type field is invalid
    """
    if csv_format == CsvFormat.QUOTED:
        fields = _split_quoted(line)
    else:
        fields = _split_plain(line)

    if len(fields) != FIELD_COUNT:
        raise DecodeSkip(
            f"expected {FIELD_COUNT} fields, got {len(fields)}", line, quiet=True
        )

    date_text, description, amount_text, type_text, category = fields

    try:
        transaction_date = parse_date(date_text)
        amount = parse_amount(amount_text)
    except ValueError as e:
        raise DecodeSkip(str(e), line) from None

    try:
        kind = TransactionKind(type_text)
    except ValueError:
        raise DecodeSkip(f"unknown transaction type {type_text!r}", line) from None

    return Transaction.model_construct(
        date=transaction_date,
        description=description,
        amount=amount,
        kind=kind,
        category=category,
    )


# =============================================================================
# WHOLE FILE
# =============================================================================

def decode_all(
    lines: Iterable[str],
    csv_format: CsvFormat = CsvFormat.PLAIN,
) -> DecodeResult:
    """
    Decode a data file.

    The first line is always treated as the header and skipped without
    looking at it. Each remaining line is decoded on its own; bad lines
    are recorded in DecodeResult.skipped and never stop the load.
    """
    result = DecodeResult()

    for line_number, raw in enumerate(lines, start=1):
        if line_number == 1:
            continue
        line = raw.rstrip("\r\n")
        try:
            result.transactions.append(decode_line(line, csv_format))
        except DecodeSkip as skip:
            result.skipped.append(
                SkippedLine(line_number=line_number, line=line, reason=skip.reason)
            )
            if skip.quiet:
                logger.debug(
                    "line_dropped",
                    line_number=line_number,
                    reason=skip.reason,
                )
            else:
                logger.warning(
                    "skipping_malformed_line",
                    line_number=line_number,
                    line=line,
                    reason=skip.reason,
                )

    return result


def encode_all(
    transactions: Sequence[Transaction],
    csv_format: CsvFormat = CsvFormat.PLAIN,
) -> list[str]:
    """Header line followed by one encoded line per transaction, in order."""
    return [HEADER] + [encode_line(t, csv_format) for t in transactions]
