"""UTF-8 <-> CP-1252 transcoding, one character at a time.

Both directions work on a single unit: one UTF-8 sequence in, one
CP-1252 byte out, or one CP-1252 byte in, one UTF-8 sequence out.
Neither direction raises for bad input. Malformed UTF-8 becomes the
substitute byte (0x1A) with one input byte consumed, so a caller can
step past it and keep going.
"""

from typing import Union

from cp1252_codec.codec.cp1252 import decode, encode
from cp1252_codec.core.constants import (
    CP1252_TO_UNICODE,
    OVERLONG_THRESHOLDS,
    SUBSTITUTE,
)

Buffer = Union[bytes, bytearray, memoryview]


# Precomputed UTF-8 form of every CP-1252 byte
CP1252_TO_UTF8: tuple[bytes, ...] = tuple(
    chr(code_point).encode("utf-8") for code_point in CP1252_TO_UNICODE
)


def _peek(data: Buffer, index: int) -> int:
    """Read one byte, treating anything past the end as 0x00."""
    if 0 <= index < len(data):
        return data[index]
    return 0


def _is_continuation(value: int) -> bool:
    return (value & 0xC0) == 0x80


def utf8_to_cp1252(data: Buffer, offset: int = 0) -> tuple[int, int]:
    """
    Transcode the UTF-8 sequence starting at ``data[offset]`` to CP-1252.

    Args:
        data: Bytes-like view holding at least the lead byte
        offset: Position of the lead byte

    Returns:
        Tuple of (cp1252_byte, bytes_consumed). ``bytes_consumed`` is
        between 1 and 4. Invalid or overlong sequences yield
        (0x1A, 1).
    """
    lead = _peek(data, offset)

    if lead < 0x80:
        return lead, 1  # ASCII fast path

    if (lead & 0xE0) == 0xC0:
        length, code_point = 2, lead & 0x1F
    elif (lead & 0xF0) == 0xE0:
        length, code_point = 3, lead & 0x0F
    elif (lead & 0xF8) == 0xF0 and lead <= 0xF4:
        length, code_point = 4, lead & 0x07
    else:
        # Stray continuation byte or a lead outside the Unicode range
        return SUBSTITUTE, 1

    for i in range(1, length):
        trail = _peek(data, offset + i)
        if not _is_continuation(trail):
            return SUBSTITUTE, 1
        code_point = (code_point << 6) | (trail & 0x3F)

    if code_point < OVERLONG_THRESHOLDS[length]:
        return SUBSTITUTE, 1  # overly long encoding

    return encode(code_point), length


def cp1252_to_utf8(byte: int) -> bytes:
    """Convert one CP-1252 byte to its 1-3 byte UTF-8 sequence."""
    return CP1252_TO_UTF8[byte & 0xFF]


def cp1252_to_utf8_into(buffer: bytearray, byte: int, offset: int = 0) -> int:
    """
    Write the UTF-8 form of one CP-1252 byte into ``buffer`` at ``offset``.

    Args:
        buffer: Writable destination (bytearray or writable memoryview)
        byte: CP-1252 byte; only the low 8 bits are used
        offset: Where to start writing

    Returns:
        Number of bytes written (1 to 3)

    Raises:
        ValueError: If the destination cannot hold the sequence
    """
    encoded = CP1252_TO_UTF8[byte & 0xFF]
    end = offset + len(encoded)
    if offset < 0 or end > len(buffer):
        raise ValueError(
            f"buffer too small: need {len(encoded)} bytes at offset {offset}, "
            f"have {max(len(buffer) - offset, 0)}"
        )
    buffer[offset:end] = encoded
    return len(encoded)


def utf8_length(byte: int) -> int:
    """Length of the UTF-8 sequence for one CP-1252 byte (1 to 3)."""
    return len(CP1252_TO_UTF8[byte & 0xFF])


def decode_to_utf8(byte: int) -> bytes:
    """Decode through the code point table and re-encode as UTF-8.

    Slow path equivalent of :func:`cp1252_to_utf8`, kept for checking
    the precomputed table.
    """
    return chr(decode(byte)).encode("utf-8")
