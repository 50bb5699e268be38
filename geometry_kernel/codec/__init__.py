"""Encode/decode contract used by storage and transport layers."""

from .binary import decode_binary, encode_binary, read_binary
from .text import (
    FIELD_SEPARATOR,
    RECORD_TERMINATOR,
    TextCursor,
    decode_text,
    encode_text,
    format_tagged,
    parse_tagged,
)

__all__ = [
    "encode_binary",
    "decode_binary",
    "read_binary",
    "encode_text",
    "decode_text",
    "TextCursor",
    "FIELD_SEPARATOR",
    "RECORD_TERMINATOR",
    "format_tagged",
    "parse_tagged",
]
