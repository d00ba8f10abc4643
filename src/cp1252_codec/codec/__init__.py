"""Single-unit CP-1252 / Unicode / UTF-8 conversion."""

from cp1252_codec.codec.cp1252 import UNICODE_TO_CP1252, decode, encode, is_defined
from cp1252_codec.codec.utf8 import (
    CP1252_TO_UTF8,
    cp1252_to_utf8,
    cp1252_to_utf8_into,
    utf8_length,
    utf8_to_cp1252,
)

__all__ = [
    "decode",
    "encode",
    "is_defined",
    "utf8_to_cp1252",
    "cp1252_to_utf8",
    "cp1252_to_utf8_into",
    "utf8_length",
    "UNICODE_TO_CP1252",
    "CP1252_TO_UTF8",
]
