"""CP-1252 (Windows Western European) byte <-> code point conversion."""

from bisect import bisect_left

from cp1252_codec.core.constants import (
    CP1252_TO_UNICODE,
    SUBSTITUTE,
    UNDEFINED_BYTES,
)


def _build_reverse(table: tuple[int, ...]) -> tuple[tuple[int, int], ...]:
    """Sort (code point, byte) pairs by code point, keeping the lowest byte."""
    first: dict[int, int] = {}
    for byte, code_point in enumerate(table):
        first.setdefault(code_point, byte)
    return tuple(sorted(first.items()))


# Build reverse mapping
UNICODE_TO_CP1252: tuple[tuple[int, int], ...] = _build_reverse(CP1252_TO_UNICODE)

# Search keys and their bytes, split so bisect can run over plain ints
_KEYS: tuple[int, ...] = tuple(cp for cp, _ in UNICODE_TO_CP1252)
_BYTES: tuple[int, ...] = tuple(b for _, b in UNICODE_TO_CP1252)


def decode(byte: int) -> int:
    """Convert one CP-1252 byte to its Unicode code point.

    Only the low 8 bits of ``byte`` are used. Undefined positions map to
    their best-fit code point, so every input has an answer.
    """
    return CP1252_TO_UNICODE[byte & 0xFF]


def encode(code_point: int) -> int:
    """Convert a Unicode code point to one CP-1252 byte.

    Returns ``SUBSTITUTE`` (0x1A) when the code point has no exact
    mapping, including negative values and anything past the table.
    """
    i = bisect_left(_KEYS, code_point)
    if i < len(_KEYS) and _KEYS[i] == code_point:
        return _BYTES[i]
    return SUBSTITUTE


def is_defined(byte: int) -> bool:
    """True unless ``byte`` is one of the five unassigned CP-1252 positions."""
    return (byte & 0xFF) not in UNDEFINED_BYTES
