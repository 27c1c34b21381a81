"""Variable-length integer encoding.

Unsigned integers are written little-endian in groups of 7 bits, with the high
bit (0x80) of every byte except the last set as a continuation flag. Signed
integers are first zigzag-mapped (0, -1, 1, -2, ... -> 0, 1, 2, 3, ...) so
small magnitudes of either sign stay short.
"""

from __future__ import annotations

from ..exceptions import VarintOverflowError
from .stream import ByteReader, ByteWriter

MAX_VARINT_LEN = 10

_UINT64_MAX = (1 << 64) - 1


def zigzag_encode(value: int) -> int:
    """Map a signed integer to an unsigned one (n >= 0 -> 2n, n < 0 -> -2n - 1)."""
    return value * 2 if value >= 0 else -value * 2 - 1


def zigzag_decode(value: int) -> int:
    """Inverse of zigzag_encode()."""
    return (value >> 1) if not value & 1 else -((value + 1) >> 1)


def encode_uvarint(value: int) -> bytes:
    """Encode a non-negative integer using the minimal number of bytes.

    Raises:
        ValueError: If value is negative or does not fit in 64 bits
    """
    if value < 0:
        raise ValueError(f"encode_uvarint requires non-negative value, got {value}")
    if value > _UINT64_MAX:
        raise ValueError(f"Value {value} does not fit in 64 bits")

    result = bytearray()
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)
    return bytes(result)


def encode_varint(value: int) -> bytes:
    """Encode a signed integer (zigzag + varint)."""
    return encode_uvarint(zigzag_encode(value))


def write_uvarint(writer: ByteWriter, value: int) -> int:
    """Write an unsigned varint, returning the number of bytes written."""
    return writer.write_bytes(encode_uvarint(value))


def write_varint(writer: ByteWriter, value: int) -> int:
    """Write a signed (zigzag) varint, returning the number of bytes written."""
    return writer.write_bytes(encode_varint(value))


def read_uvarint(reader: ByteReader) -> int:
    """Read an unsigned varint.

    Raises:
        VarintOverflowError: If no terminating byte appears within 10 bytes,
            or the value exceeds 64 bits
        UnexpectedEndOfData: If the stream ends inside the varint
    """
    value = 0
    shift = 0
    for i in range(MAX_VARINT_LEN):
        byte = reader.read_byte()
        if byte < 0x80:
            if i == MAX_VARINT_LEN - 1 and byte > 1:
                raise VarintOverflowError("varint overflows a 64-bit integer")
            return value | (byte << shift)
        value |= (byte & 0x7F) << shift
        shift += 7
    raise VarintOverflowError(f"varint longer than {MAX_VARINT_LEN} bytes")


def read_varint(reader: ByteReader) -> int:
    """Read a signed (zigzag) varint."""
    return zigzag_decode(read_uvarint(reader))
