"""Structured values: Object (name -> Value) and Array (list of Value).

Both containers nest arbitrarily and are terminated by a sentinel instead of
a length prefix:

    Object: [key\\0][tag][payload] ... [0x00]
    Array:  [tag][payload] ... [0x5d]

Decoding recurses through the type registry, bounded by
``CodecConfig.max_depth``.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, field_validator

from ..codec.stream import ByteReader, ByteWriter
from ..constants import END_OF_OBJECT, TypeTag
from ..exceptions import EncodeError, MaxDepthExceededError
from .base import Value
from .primitives import read_cstring, write_cstring


def _check_depth(reader: ByteReader, depth: int) -> None:
    if depth > reader.max_depth:
        raise MaxDepthExceededError(reader.max_depth)


class Object(Value):
    """Key-value map of nested values.

    Entries are written in ascending key order, so equal objects always
    produce identical bytes. Keys must be non-empty and free of NUL.

    Example:
        >>> obj = Object(value={"count": Integer(value=5), "on": Bool(value=True)})
    """

    value: dict[str, Value] = Field(default_factory=dict)

    xlpp_type: ClassVar[int] = TypeTag.OBJECT

    @field_validator("value")
    @classmethod
    def _valid_keys(cls, value: dict[str, Value]) -> dict[str, Value]:
        for key in value:
            if not key:
                raise ValueError("object keys must not be empty")
            if "\x00" in key:
                raise ValueError(f"object key {key!r} contains NUL")
        return value

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        # Import here to avoid circular dependency
        from ..codec.reader import read_value

        _check_depth(reader, depth)
        entries: dict[str, Value] = {}
        while True:
            first = reader.read_byte()
            if first == END_OF_OBJECT:
                break
            key = read_cstring(reader, bytes((first,)))
            entries[key] = read_value(reader, depth + 1)
        self.value = entries

    def write_to(self, writer: ByteWriter) -> int:
        n = 0
        for key in sorted(self.value):
            if not key:
                raise EncodeError("object keys must not be empty")
            n += write_cstring(writer, key)
            n += self.value[key].write_tagged(writer)
        return n + writer.write_byte(END_OF_OBJECT)

    def __str__(self) -> str:
        return "{" + ",".join(f"{key}: {self.value[key]}" for key in sorted(self.value)) + "}"


class Array(Value):
    """Ordered list of nested values of any type."""

    value: list[Value] = Field(default_factory=list)

    xlpp_type: ClassVar[int] = TypeTag.ARRAY

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        from ..codec.reader import read_value

        _check_depth(reader, depth)
        items: list[Value] = []
        while True:
            item = read_value(reader, depth + 1)
            if isinstance(item, EndOfArray):
                break
            items.append(item)
        self.value = items

    def write_to(self, writer: ByteWriter) -> int:
        n = 0
        for item in self.value:
            n += item.write_tagged(writer)
        return n + writer.write_byte(TypeTag.END_OF_ARRAY)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.value) + "]"


class EndOfArray(Value):
    """Sentinel closing an Array. Never part of decoded results."""

    xlpp_type: ClassVar[int] = TypeTag.END_OF_ARRAY

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        pass

    def write_to(self, writer: ByteWriter) -> int:
        return 0

    def __str__(self) -> str:
        return "<end of array>"
