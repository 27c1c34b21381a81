"""Non-physical primitive values: integer, string, boolean, null and binary."""

from __future__ import annotations

import base64
from typing import Any, ClassVar

from pydantic import Field, field_validator

from ..codec.stream import ByteReader, ByteWriter
from ..codec.varint import read_uvarint, read_varint, write_uvarint, write_varint
from ..constants import TypeTag
from ..exceptions import DecodeError, EncodeError
from .base import Value

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def read_cstring(reader: ByteReader, first: bytes = b"") -> str:
    """Read a NUL-terminated UTF-8 string, consuming the terminator.

    Args:
        reader: ByteReader to read from
        first: Bytes of the string already consumed by the caller

    Raises:
        UnexpectedEndOfData: If the stream ends before the terminator
        DecodeError: If the bytes are not valid UTF-8
    """
    buf = bytearray(first)
    while True:
        byte = reader.read_byte()
        if byte == 0:
            break
        buf.append(byte)
    try:
        return buf.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"invalid UTF-8 string: {e}") from e


def write_cstring(writer: ByteWriter, text: str) -> int:
    """Write a string followed by a NUL terminator.

    Raises:
        EncodeError: If the string contains a NUL character
    """
    if "\x00" in text:
        raise EncodeError(f"string {text!r} contains an embedded NUL terminator")
    return writer.write_bytes(text.encode("utf-8") + b"\x00")


class Integer(Value):
    """Signed 64-bit integer, zigzag varint encoded (1-10 bytes)."""

    value: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)

    xlpp_type: ClassVar[int] = TypeTag.INTEGER

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        decoded = read_varint(reader)
        if not INT64_MIN <= decoded <= INT64_MAX:
            raise DecodeError(f"integer {decoded} out of 64-bit range")
        self.value = decoded

    def write_to(self, writer: ByteWriter) -> int:
        return write_varint(writer, self.value)


class String(Value):
    """UTF-8 string, written NUL-terminated."""

    value: str = ""

    xlpp_type: ClassVar[int] = TypeTag.STRING

    @field_validator("value")
    @classmethod
    def _no_terminator(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError("string must not contain NUL characters")
        return value

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        self.value = read_cstring(reader)

    def write_to(self, writer: ByteWriter) -> int:
        return write_cstring(writer, self.value)

    def __str__(self) -> str:
        return repr(self.value)


class Bool(Value):
    """Boolean. The state is carried by the type tag; the payload is empty."""

    value: bool = False

    xlpp_type: ClassVar[int] = TypeTag.BOOL

    def xlpp_tag(self) -> int:
        return TypeTag.BOOL_TRUE if self.value else TypeTag.BOOL_FALSE

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        pass

    def write_to(self, writer: ByteWriter) -> int:
        return 0

    def __str__(self) -> str:
        return "true" if self.value else "false"


class Null(Value):
    """Empty value. It holds no data."""

    xlpp_type: ClassVar[int] = TypeTag.NULL

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        pass

    def write_to(self, writer: ByteWriter) -> int:
        return 0

    def to_json(self) -> Any:
        return None

    @classmethod
    def from_json(cls, data: Any) -> Value:
        if data is not None:
            raise ValueError(f"null expects null, got {data!r}")
        return cls()

    def __str__(self) -> str:
        return "null"


class Binary(Value):
    """Raw bytes, written with a varint length prefix."""

    value: bytes = b""

    xlpp_type: ClassVar[int] = TypeTag.BINARY

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        length = read_uvarint(reader)
        self.value = reader.read_exact(length)

    def write_to(self, writer: ByteWriter) -> int:
        n = write_uvarint(writer, len(self.value))
        return n + writer.write_bytes(self.value)

    def to_json(self) -> Any:
        return base64.b64encode(self.value).decode("ascii")

    @classmethod
    def from_json(cls, data: Any) -> Value:
        return cls(value=base64.b64decode(data, validate=True))

    def __str__(self) -> str:
        return self.value.hex().upper()
