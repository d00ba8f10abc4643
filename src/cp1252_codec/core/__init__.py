"""Core tables and constants."""

from cp1252_codec.core.constants import (
    CP1252_TO_UNICODE,
    SUBSTITUTE,
    UNDEFINED_BYTES,
)

__all__ = ["CP1252_TO_UNICODE", "SUBSTITUTE", "UNDEFINED_BYTES"]
