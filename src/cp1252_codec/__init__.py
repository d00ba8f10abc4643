"""
cp1252-codec: CP-1252 <-> Unicode transcoding, one unit at a time

Quick Start:
    >>> import cp1252_codec as cp
    >>> hex(cp.decode(0x80))
    '0x20ac'
    >>> hex(cp.encode(0x20AC))
    '0x80'
    >>> cp.utf8_to_cp1252(b"\\xe2\\x82\\xac")
    (128, 3)
    >>> cp.cp1252_to_utf8(0x80)
    b'\\xe2\\x82\\xac'

Features:
    - Byte to code point lookup over a total 256-entry table
    - Code point to byte via binary search, 0x1A for anything unmappable
    - Single-sequence UTF-8 decoding with overlong and truncation rejection
    - Precomputed CP-1252 to UTF-8 expansion
    - `cp1252` command for inspecting single bytes and code points
"""

__version__ = "0.1.0"

# Constants
from cp1252_codec.core.constants import CP1252_TO_UNICODE, SUBSTITUTE, UNDEFINED_BYTES

# Conversions
from cp1252_codec.codec import (
    CP1252_TO_UTF8,
    UNICODE_TO_CP1252,
    cp1252_to_utf8,
    cp1252_to_utf8_into,
    decode,
    encode,
    is_defined,
    utf8_length,
    utf8_to_cp1252,
)

__all__ = [
    # Version
    "__version__",
    # Constants
    "SUBSTITUTE",
    "UNDEFINED_BYTES",
    "CP1252_TO_UNICODE",
    "UNICODE_TO_CP1252",
    "CP1252_TO_UTF8",
    # Conversions
    "decode",
    "encode",
    "utf8_to_cp1252",
    "cp1252_to_utf8",
    "cp1252_to_utf8_into",
    # Introspection
    "is_defined",
    "utf8_length",
]
