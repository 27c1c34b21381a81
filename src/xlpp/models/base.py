"""Base value classes and xlpp-specific pydantic configuration.

Every decodable XLPP item is a subclass of ``Value``. Each subclass declares
its wire type tag as a ClassVar and implements ``read_from`` / ``write_to``
for its payload. Fixed-point sensor readings derive from ``ScalarValue`` and
only declare their fields; the generic codec walks their ``ValueSchema``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..codec.schema import ValueSchema
from ..codec.stream import ByteReader, ByteWriter
from ..constants import MARKER_TYPE


class Value(BaseModel):
    """Base class for all xlpp values.

    Subclasses set ``xlpp_type`` and optionally ``xlpp_format``, a
    ``str.format`` template over the model fields used by ``str()``.

    Example:
        >>> class Luminosity(ScalarValue):
        ...     value: int = FixedPoint(width=2)
        ...
        ...     xlpp_type: ClassVar[int] = 101
        ...     xlpp_format: ClassVar[str] = "{value} lux"

    Attributes:
        xlpp_type: Type tag written in front of the payload
        xlpp_format: Human-readable rendering template
    """

    model_config = ConfigDict(
        # Validate on assignment, decoders populate fields one by one
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # NaN and infinity have no fixed-point wire form
        allow_inf_nan=False,
    )

    xlpp_type: ClassVar[int]
    xlpp_format: ClassVar[str] = "{value}"

    def xlpp_tag(self) -> int:
        """Return the type tag of this value on the wire."""
        return self.xlpp_type

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        """Populate this value from the payload bytes of the stream.

        Args:
            reader: ByteReader positioned right after the type tag
            depth: Container nesting depth of this value (1 at top level)

        Raises:
            DecodeError: If data is truncated or malformed
        """
        raise NotImplementedError

    def write_to(self, writer: ByteWriter) -> int:
        """Write the payload bytes of this value (without type tag).

        Returns:
            Number of bytes written

        Raises:
            EncodeError: If the stream fails
        """
        raise NotImplementedError

    def write_tagged(self, writer: ByteWriter) -> int:
        """Write the type tag followed by the payload."""
        n = writer.write_byte(self.xlpp_tag())
        return n + self.write_to(writer)

    def to_json(self) -> Any:
        """Return a JSON-compatible representation.

        Single-field values map to their bare value, others to an object.
        """
        data = self.model_dump(mode="json")
        if list(data) == ["value"]:
            return data["value"]
        return data

    @classmethod
    def from_json(cls, data: Any) -> Value:
        """Build a value from the output of ``to_json()``."""
        if list(cls.model_fields) == ["value"]:
            return cls(value=data)
        return cls.model_validate(data)

    def __str__(self) -> str:
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        return self.xlpp_format.format(**fields)


class ScalarValue(Value):
    """Fixed-size value whose fields are all declared with FixedPoint()."""

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        for field in ValueSchema.from_model(type(self)).fields:
            setattr(self, field.name, field.read(reader))

    def write_to(self, writer: ByteWriter) -> int:
        n = 0
        for field in ValueSchema.from_model(type(self)).fields:
            n += field.write(writer, getattr(self, field.name))
        return n


class Marker(Value):
    """Out-of-band record sent on a reserved channel instead of a type tag.

    Markers are never looked up in the registry: the reader recognizes them
    by channel and the writer omits their type tag.

    Attributes:
        xlpp_channel: Reserved channel carrying this marker
    """

    xlpp_type: ClassVar[int] = MARKER_TYPE
    xlpp_channel: ClassVar[int]
