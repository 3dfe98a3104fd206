"""Data file codec package."""

from finance_tracker.codec.csv_codec import (
    HEADER,
    DecodeResult,
    DecodeSkip,
    decode_all,
    decode_line,
    encode_all,
    encode_line,
    format_amount,
    parse_amount,
    parse_date,
)

__all__ = [
    "HEADER",
    "DecodeResult",
    "DecodeSkip",
    "decode_all",
    "decode_line",
    "encode_all",
    "encode_line",
    "format_amount",
    "parse_amount",
    "parse_date",
]
