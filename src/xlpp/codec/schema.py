"""Schema introspection for fixed-point value models.

This module analyzes pydantic value models and extracts the wire layout of
each field: byte width, signedness and the fixed-point scale factor.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Type

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import EncodeError, SchemaError
from .stream import ByteReader, ByteWriter


@dataclass(frozen=True)
class WireField:
    """Wire layout of a single fixed-point field.

    Attributes:
        name: Field name
        python_type: Python type annotation (float, int or bool)
        width: Size on the wire in bytes (1-4)
        signed: Whether the wire integer is two's complement
        scale: Multiplier applied before encoding (value = wire / scale)
    """

    name: str
    python_type: Type[Any]
    width: int
    signed: bool
    scale: int

    def to_wire(self, value: Any) -> int:
        """Convert a field value to its wire integer.

        The scaled value is rounded to the nearest integer, so ``2.876 * 1000``
        (2875.9999999999995 in binary floating point) becomes 2876.
        """
        if self.python_type is bool:
            return 1 if value else 0
        if self.python_type is int:
            return int(value) * self.scale
        if not math.isfinite(value):
            raise EncodeError(f"Field {self.name}: cannot encode non-finite value {value}")
        return round(value * self.scale)

    def from_wire(self, wire: int) -> Any:
        """Convert a wire integer back to a field value."""
        if self.python_type is bool:
            return wire != 0
        if self.python_type is int:
            return wire // self.scale
        return wire / self.scale

    def write(self, writer: ByteWriter, value: Any) -> int:
        """Write the field value, returning the number of bytes written."""
        wire = self.to_wire(value)
        if self.signed:
            return writer.write_int(wire, self.width)
        return writer.write_uint(wire, self.width)

    def read(self, reader: ByteReader) -> Any:
        """Read the field value from all ``width`` bytes of the stream."""
        if self.signed:
            return self.from_wire(reader.read_int(self.width))
        return self.from_wire(reader.read_uint(self.width))


class ValueSchema:
    """Wire layout of an entire fixed-point value model.

    Fields are encoded in declaration order.

    Example:
        >>> schema = ValueSchema.from_model(Accelerometer)
        >>> [(f.name, f.width) for f in schema.fields]
        [('x', 2), ('y', 2), ('z', 2)]
        >>> schema.size
        6
    """

    _cache: dict[type, ValueSchema] = {}

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize schema from a pydantic model.

        Args:
            model_class: Pydantic model class to introspect
        """
        self.model_class = model_class
        self.fields: List[WireField] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> ValueSchema:
        """Return the (cached) schema of a pydantic model.

        Args:
            model_class: Pydantic model class

        Returns:
            ValueSchema instance
        """
        schema = cls._cache.get(model_class)
        if schema is None:
            schema = cls(model_class)
            cls._cache[model_class] = schema
        return schema

    @property
    def size(self) -> int:
        """Total encoded size in bytes."""
        return sum(field.width for field in self.fields)

    def _introspect(self) -> None:
        """Introspect the model and populate wire fields."""
        for field_name, field_info in self.model_class.model_fields.items():
            self.fields.append(self._extract_wire_field(field_name, field_info))

    def _extract_wire_field(self, name: str, field_info: FieldInfo) -> WireField:
        """Extract the wire layout from a pydantic FieldInfo.

        Args:
            name: Field name
            field_info: Pydantic FieldInfo object

        Returns:
            WireField with extracted information
        """
        annotation = field_info.annotation
        if annotation not in (float, int, bool):
            raise SchemaError(
                f"Field {name}: unsupported type {annotation}. Supported: float, int, bool."
            )

        extra = field_info.json_schema_extra
        if not isinstance(extra, dict) or "width" not in extra:
            raise SchemaError(f"Field {name}: missing FixedPoint() wire metadata")

        width = extra["width"]
        scale = extra.get("scale", 1)
        if not isinstance(width, int) or not 1 <= width <= 4:
            raise SchemaError(f"Field {name}: width must be 1-4 bytes, got {width}")
        if not isinstance(scale, int) or scale < 1:
            raise SchemaError(f"Field {name}: scale must be a positive integer, got {scale}")

        return WireField(
            name=name,
            python_type=annotation,
            width=width,
            signed=bool(extra.get("signed", False)),
            scale=scale,
        )
